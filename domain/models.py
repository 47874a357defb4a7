from typing import Annotated, Any

from openai.types.chat import (
    ChatCompletionAssistantMessageParam,
    ChatCompletionMessageParam,
    ChatCompletionSystemMessageParam,
    ChatCompletionUserMessageParam,
)
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictStr


NormalizedIngredients = list[str]


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class GenerationRequest(BaseModel):
    """What the user asked for. Never stored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prompt: StrictStr
    is_vegetarian: bool = Field(default=False, alias="isVegetarian")
    is_gluten_free: bool = Field(default=False, alias="isGlutenFree")


class PromptMessages:
    """The system, user and example assistant messages, always in that order."""

    def __init__(self, *, system: str, user: str, assistant: str) -> None:
        self.system = system
        self.user = user
        self.assistant = assistant

    def __repr__(self) -> str:
        return f"<PromptMessages(user={self.user!r})>"

    def to_list(self) -> list[ChatCompletionMessageParam]:
        system_message: ChatCompletionSystemMessageParam = {
            "role": "system",
            "content": self.system,
        }
        user_message: ChatCompletionUserMessageParam = {
            "role": "user",
            "content": self.user,
        }
        assistant_message: ChatCompletionAssistantMessageParam = {
            "role": "assistant",
            "content": self.assistant,
        }
        return [system_message, user_message, assistant_message]


class RecipeDraft(BaseModel):
    """A recipe as parsed from the model output, before it is stored.

    Strict: values are taken as the model wrote them, nothing is coerced or
    defaulted. Whitespace-only text counts as missing.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    title: NonBlankStr
    description: NonBlankStr
    ingredients: dict[NonBlankStr, NonBlankStr] = Field(min_length=1)
    instructions: list[NonBlankStr] = Field(min_length=1)


class PersistedRecipe:
    def __init__(
        self,
        *,
        title: str,
        description: str,
        ingredients: dict[str, str],
        instructions: list[str],
        user_input: NormalizedIngredients,
        search_words: str,
    ) -> None:
        self.title = title
        self.description = description
        self.ingredients = ingredients
        self.instructions = instructions
        self.user_input = user_input
        self.search_words = search_words

    def __repr__(self) -> str:
        return f"<PersistedRecipe(title={self.title})>"

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "ingredients": dict(self.ingredients),
            "instructions": list(self.instructions),
            "userInput": list(self.user_input),
            "searchWords": self.search_words,
        }


class StoredRecipe(PersistedRecipe):
    """A `PersistedRecipe` with the identity the store gave it."""

    def __init__(self, *, id: str, created_at: str, **fields: Any) -> None:
        super().__init__(**fields)
        self.id = id
        self.created_at = created_at

    def __repr__(self) -> str:
        return f"<StoredRecipe(id={self.id}, title={self.title})>"

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **super().to_dict(), "createdAt": self.created_at}


class GenerationOutcome:
    """The one result a caller sees for a generation request."""

    def __init__(
        self,
        *,
        status_code: int,
        recipe: StoredRecipe | None = None,
        error: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.recipe = recipe
        self.error = error

    @property
    def success(self) -> bool:
        return self.recipe is not None

    def __repr__(self) -> str:
        return f"<GenerationOutcome(status_code={self.status_code}, success={self.success})>"

    def to_dict(self) -> dict[str, Any]:
        if self.recipe is not None:
            return {"success": True, "recipe": self.recipe.to_dict()}
        return {"success": False, "error": self.error}
