"""Pydantic models for form input and per-submission UI state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scraper_generator.utils import trim


class FormInput(BaseModel):
    """Values submitted from the generator form."""

    model_config = ConfigDict(populate_by_name=True)

    website_url: str = Field(
        alias="websiteUrl",
        min_length=1,
        description="Website URL or bare domain (e.g., example.com)",
    )
    api_key: str = Field(
        default="",
        alias="apiKey",
        description="Optional Firecrawl API key; empty means unauthenticated",
    )
    full_version: bool = Field(
        default=False,
        alias="fullVersion",
        description="Request the extended variant of the file",
    )

    @field_validator("website_url", "api_key", mode="before")
    @classmethod
    def _trim_text(cls, value: Any) -> Any:
        # Trimmed before min_length is checked, so blank input is rejected
        return trim(value) if isinstance(value, str) else value


@dataclass
class UIState:
    """Loading flag owned by whoever triggered a submission."""

    is_loading: bool = False
