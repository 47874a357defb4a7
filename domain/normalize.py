from domain.models import NormalizedIngredients


def capitalize_first(text: str) -> str:
    # Unlike str.capitalize, leaves the rest of the string alone.
    return text[:1].upper() + text[1:]


def normalize_ingredients(prompt: str) -> NormalizedIngredients:
    """Split the raw ingredient text into a tidy list for storage and search.

    Empty segments (e.g. a trailing comma) are kept as empty strings.
    """
    return [capitalize_first(part.strip()) for part in prompt.split(",")]
