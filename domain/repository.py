from datetime import datetime, timezone
import json
import logging
from uuid import uuid4

from databases import Database

from domain.exceptions import PersistenceError
from domain.models import PersistedRecipe, StoredRecipe


logger = logging.getLogger(__name__)


CREATE_RECIPES_TABLE = """
CREATE TABLE IF NOT EXISTS Recipes (
    id VARCHAR(64) PRIMARY KEY,
    title VARCHAR(256) NOT NULL,
    description TEXT NOT NULL,
    ingredients TEXT NOT NULL,
    instructions TEXT NOT NULL,
    user_input TEXT NOT NULL,
    search_words TEXT NOT NULL,
    created_at VARCHAR(64) NOT NULL
)
"""


CREATE_RECIPE = """
INSERT INTO Recipes(
    id, title, description, ingredients, instructions, user_input, search_words, created_at
) VALUES (
    :id, :title, :description, :ingredients, :instructions, :user_input, :search_words, :created_at
)
"""


class RecipesRepository:
    """Stores generated recipes. Records are written once and never updated."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def create_table(self) -> None:
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            query=CREATE_RECIPES_TABLE
        )

    async def save(self, record: PersistedRecipe) -> StoredRecipe:
        stored = StoredRecipe(
            id=uuid4().hex,
            created_at=datetime.now(timezone.utc).isoformat(),
            title=record.title,
            description=record.description,
            ingredients=record.ingredients,
            instructions=record.instructions,
            user_input=record.user_input,
            search_words=record.search_words,
        )
        values = {
            "id": stored.id,
            "title": stored.title,
            "description": stored.description,
            "ingredients": json.dumps(stored.ingredients),
            "instructions": json.dumps(stored.instructions),
            "user_input": json.dumps(stored.user_input),
            "search_words": stored.search_words,
            "created_at": stored.created_at,
        }
        try:
            await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
                CREATE_RECIPE, values=values
            )
        except Exception as e:
            raise PersistenceError(f"Could not store recipe: {e!r}") from e

        logger.info("Stored recipe %s", stored.id)
        return stored
