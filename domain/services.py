import logging
from typing import Protocol

from domain.exceptions import (
    MalformedOutputError,
    PersistenceError,
    RefusalError,
    UpstreamError,
)
from domain.models import (
    GenerationOutcome,
    GenerationRequest,
    NormalizedIngredients,
    PersistedRecipe,
    PromptMessages,
    RecipeDraft,
    StoredRecipe,
)
from domain.normalize import normalize_ingredients
from domain.prompts import build_messages
from domain.validators import validate_recipe


logger = logging.getLogger(__name__)


REFUSAL_MESSAGE = (
    "You have provided an invalid or non-existing ingredient. Please try again!"
)
GENERIC_FAILURE_MESSAGE = "The recipe could not be generated"


class Generator(Protocol):
    async def generate(self, messages: PromptMessages) -> str:
        ...


class Repository(Protocol):
    async def save(self, record: PersistedRecipe) -> StoredRecipe:
        ...


def assemble_recipe(
    draft: RecipeDraft,
    normalized: NormalizedIngredients,
    raw_prompt: str,
) -> PersistedRecipe:
    return PersistedRecipe(
        title=draft.title,
        description=draft.description,
        ingredients=draft.ingredients,
        instructions=draft.instructions,
        user_input=normalized,
        search_words=raw_prompt,
    )


async def generate_recipe(
    request: GenerationRequest,
    *,
    llm: Generator,
    repository: Repository,
) -> GenerationOutcome:
    """Generate, validate and store one recipe.

    Every pipeline failure becomes an outcome: a refusal is the caller's to
    fix, anything else is reported with a fixed message and logged here.
    """
    try:
        raw = await llm.generate(build_messages(request))
        draft = validate_recipe(raw)
        record = assemble_recipe(
            draft, normalize_ingredients(request.prompt), request.prompt
        )
        stored = await repository.save(record)
    except RefusalError:
        logger.warning("Generation refused: %s", REFUSAL_MESSAGE)
        return GenerationOutcome(status_code=400, error=REFUSAL_MESSAGE)
    except (MalformedOutputError, UpstreamError, PersistenceError) as e:
        logger.error("Generation failed: %s: %s", type(e).__name__, e)
        return GenerationOutcome(status_code=500, error=GENERIC_FAILURE_MESSAGE)

    return GenerationOutcome(status_code=201, recipe=stored)
