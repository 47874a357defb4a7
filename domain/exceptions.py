"""Errors raised by the recipe generation pipeline."""


class RecipeGenerationError(Exception):
    """Base exception for the recipe generation pipeline."""

    pass


class RefusalError(RecipeGenerationError):
    """Raised when the model refuses the ingredients it was given."""

    pass


class MalformedOutputError(RecipeGenerationError):
    """Raised when the model output is not a usable recipe."""

    pass


class UpstreamError(RecipeGenerationError):
    """Raised when the call to the generation service fails."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"status={self.status_code} {self.args[0]}"
        return self.args[0]


class PersistenceError(RecipeGenerationError):
    """Raised when a recipe cannot be stored."""

    pass
