from __future__ import annotations
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TRANSCRIPT_TAGGER_", case_sensitive=False)

    # Tagging
    taxonomy: str = Field(default="default")           # built-in preset name
    max_tags: int = Field(default=3, ge=1)

    # Note categorization
    categorize_taxonomy: str = Field(default="extended")

settings = Settings()
