from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from styled_text.schemas import LetterStyle, LetterType


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="STYLED_TEXT_", extra="ignore")

    default_letter_type: LetterType = "monospace"
    default_letter_style: LetterStyle = "normal"
    random_seed: int | None = None
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
