"""Pydantic data models for generator input, state and feedback.

This module defines the data structures used throughout the generator:
- Form submission values (FormInput) and loading state (UIState)
- User feedback (Notification)
- MCP tool results (GenerateResponse)
"""

from scraper_generator.models.feedback import GenerateResponse, Notification
from scraper_generator.models.form import FormInput, UIState

__all__ = [
    # Input models
    "FormInput",
    "UIState",
    # Feedback models
    "Notification",
    "GenerateResponse",
]
