"""Pydantic models for user feedback and generation results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class Notification(BaseModel):
    """Toast-style message shown to the user after a submission."""

    title: str = Field(description="Short headline, e.g. 'Success' or 'Error'")
    description: str = Field(description="Human-readable detail")
    variant: Literal["default", "destructive"] = Field(
        default="default", description="Display style of the notification"
    )


class GenerateResponse(BaseModel):
    """Response model for the generate_scraper_file tool."""

    success: bool = Field(description="Whether a file was generated")
    domain: str = Field(description="The normalized domain that was requested")
    filename: str = Field(description="Suggested download filename")
    content: str | None = Field(
        default=None, description="Generated file content if successful"
    )
    notification: Notification = Field(description="Feedback for the user")
