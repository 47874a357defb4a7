from domain.models import GenerationRequest, PromptMessages


REFUSAL_SENTINEL = "Sorry I don't understand"


CREATE_RECIPE_PROMPT = f"""
You are a helpful assistant designed to output JSON.
You will be creating a recipe based on 1-3 main ingredients the user will give you.
The user can also choose whether the recipe should be vegetarian, gluten-free
and/or lactose-free.
You can add as many ingredients as needed to make a flavourful dish.
The recipe should be designed to be cooked on a portable camping stove with one heater,
no temperature control, using only one frying-pan and/or only one saucepan.
Generate a recipe for a dish that serves 2 people.
If an ingredient requires specific details like weight and amount, include that as well.
Use grams and millilitres.
Use British English.
Important: If the user provides inappropriate or non-existing ingredients,
please respond with an array with the string : [{REFUSAL_SENTINEL}]
""".strip()


RECIPE_EXAMPLE = """
{
    "title": "[Your Title Here]",
    "description": "[Your Description Here]",
    "ingredients": {
      "Ingredient1": "[amount1]",
      "Ingredient2": "[amount2]",
      "Ingredient3": "[amount3]",
      "...": "..."
    },
    "instructions": [
      "[Step 1]",
      "[Step 2]",
      "[Step 3]",
      "..."
    ]
}
""".strip()


VEGETARIAN_SUFFIX = "\nVegetarian"
GLUTEN_FREE_SUFFIX = "\nGluten-free"


def user_message(request: GenerationRequest) -> str:
    msg = request.prompt
    if request.is_vegetarian:
        msg += VEGETARIAN_SUFFIX
    if request.is_gluten_free:
        msg += GLUTEN_FREE_SUFFIX
    return msg


def build_messages(request: GenerationRequest) -> PromptMessages:
    """Messages for one recipe generation. Only the user message varies."""
    return PromptMessages(
        system=CREATE_RECIPE_PROMPT,
        user=user_message(request),
        assistant=RECIPE_EXAMPLE,
    )
