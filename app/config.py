from enum import Enum

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.aopenai import DEFAULT_MODEL, DEFAULT_TEMPERATURE


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: Env = Env.local
    log_level: str = "INFO"
    db_url: str = "sqlite+aiosqlite:///recipes.db"
    core_model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    # COCKTAIL is the variable older deployments set.
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "COCKTAIL"),
    )
