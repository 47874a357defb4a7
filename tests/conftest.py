import json
from types import SimpleNamespace
from typing import Any

import pytest

from domain.exceptions import PersistenceError
from domain.models import PersistedRecipe, PromptMessages, StoredRecipe


CAMP_STOVE_STEW = {
    "title": "Camp Stove Stew",
    "description": "A hearty one-pot stew of beef and potato.",
    "ingredients": {
        "Beef": "300 grams",
        "Potato": "400 grams",
        "Onion": "1",
        "Beef stock": "500 millilitres",
    },
    "instructions": [
        "Brown the beef in the saucepan.",
        "Add the onion and potato and stir.",
        "Pour in the stock and simmer for 40 minutes.",
    ],
}


class FakeCompletions:
    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(role="assistant", content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Just enough of `openai.AsyncClient` for `LLMService`."""

    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.completions = FakeCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


class FakeGenerator:
    def __init__(self, raw: str = "", error: Exception | None = None) -> None:
        self.raw = raw
        self.error = error
        self.messages: list[PromptMessages] = []

    async def generate(self, messages: PromptMessages) -> str:
        self.messages.append(messages)
        if self.error is not None:
            raise self.error
        return self.raw


class FakeRepository:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.saved: list[PersistedRecipe] = []

    async def save(self, record: PersistedRecipe) -> StoredRecipe:
        if self.fail:
            raise PersistenceError("disk full")
        self.saved.append(record)
        return StoredRecipe(
            id=f"recipe-{len(self.saved)}",
            created_at="2024-01-01T00:00:00+00:00",
            title=record.title,
            description=record.description,
            ingredients=record.ingredients,
            instructions=record.instructions,
            user_input=record.user_input,
            search_words=record.search_words,
        )


@pytest.fixture
def stew_json() -> str:
    return json.dumps(CAMP_STOVE_STEW)
