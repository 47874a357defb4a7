"""Turn raw model output into a `RecipeDraft`."""

import json
import logging

from pydantic import ValidationError

from domain.exceptions import MalformedOutputError, RefusalError
from domain.models import RecipeDraft
from domain.prompts import REFUSAL_SENTINEL


logger = logging.getLogger(__name__)


def is_refusal(raw: str) -> bool:
    return REFUSAL_SENTINEL in raw


def validate_recipe(raw: str) -> RecipeDraft:
    """Validate the model output.

    The refusal check runs first: the sentinel is prose, not JSON.

    Raises:
        RefusalError: The model refused the ingredients.
        MalformedOutputError: The output is not JSON, not an object, or is
            missing a required field.
    """
    if is_refusal(raw):
        raise RefusalError("Model refused the ingredients.")

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise MalformedOutputError(f"Output is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedOutputError(
            f"Expected a JSON object, got {type(data).__name__}."
        )

    try:
        draft = RecipeDraft.model_validate(data)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise MalformedOutputError(
            f"Output does not match the recipe shape: {', '.join(fields)}"
        ) from e

    logger.debug("Validated recipe draft %r", draft.title)
    return draft
