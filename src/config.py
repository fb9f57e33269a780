"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    chromedriver_path: str = "/usr/local/bin/chromedriver"
    output_directory: str = "tmp"
    axe_command: str = "axe"

    debug: bool = False
    extraneous: bool = False
    verbose: bool = False

    log_level: str = "INFO"

    @field_validator("debug", "extraneous", "verbose", mode="before")
    @classmethod
    def _only_true_enables(cls, value: object) -> object:
        # Toggles are on for the literal "true" only; "1", "yes" etc. stay off.
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
