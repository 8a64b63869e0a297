"""Service configuration.

All configuration is read from environment variables (and an optional `.env`
file in the working directory) into a single `Settings` object.

The `DB_*` variables are the same ones the original Azure deployment exports:

    export DB_SERVER=??.postgres.database.azure.com
    export DB_PORT=5432
    export DB_DATABASE=postgres
    export DB_USER=??
    export DB_PASSWORD=??

`DATABASE_URL`, when set, takes precedence over the individual pieces.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

    db_server: str = Field(
        default="localhost",
        validation_alias=AliasChoices("DB_SERVER", "DB_HOST"),
    )
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_database: str = Field(default="postgres", validation_alias="DB_DATABASE")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: str = Field(default="", validation_alias="DB_PASSWORD")
    db_sslmode: str = Field(default="prefer", validation_alias="DB_SSLMODE")

    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3000, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, parsed once from the environment."""
    return Settings()
