"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CountryApiSettings(BaseModel):
    base_url: AnyHttpUrl = Field(default="https://restcountries.com/v3.1")
    # The /all endpoint rejects requests without an explicit field list.
    catalog_fields: tuple[str, ...] = ("name", "cca2", "capital", "region", "flags")
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)

    @field_validator("catalog_fields", mode="before")
    @classmethod
    def _split_fields(cls, value):
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    def endpoint(self, path: str) -> str:
        return f"{str(self.base_url).rstrip('/')}/{path.lstrip('/')}"


class FeedbackSettings(BaseModel):
    endpoint: AnyHttpUrl = Field(default="http://localhost:3000/api/feedback")
    reset_delay_seconds: float = Field(default=2.0, ge=0)
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)


class PaginationSettings(BaseModel):
    page_size: int = Field(default=9, ge=1, le=100)


class AutocompleteSettings(BaseModel):
    max_suggestions: int = Field(default=5, ge=1, le=50)


class ExplorerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EXPLORER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    default_language: str = "en"

    country_api: CountryApiSettings = Field(default_factory=CountryApiSettings)
    feedback: FeedbackSettings = Field(default_factory=FeedbackSettings)
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    autocomplete: AutocompleteSettings = Field(default_factory=AutocompleteSettings)


@lru_cache
def get_settings() -> ExplorerSettings:
    """Return cached settings instance."""

    return ExplorerSettings()


__all__ = [
    "AutocompleteSettings",
    "CountryApiSettings",
    "ExplorerSettings",
    "FeedbackSettings",
    "PaginationSettings",
    "get_settings",
]
