"""Turning generated text into a download and user feedback."""

from __future__ import annotations

from scraper_generator.delivery.surfaces import DownloadArtifact, DownloadSurface
from scraper_generator.errors import GenerationError
from scraper_generator.models.feedback import Notification

# Name of the file offered to the user
DOWNLOAD_FILENAME = "webscraper.txt"
DOWNLOAD_MEDIA_TYPE = "text/plain"

SUCCESS_TITLE = "Success"
SUCCESS_MESSAGE = "Web scraper file generated successfully."
ERROR_TITLE = "Error"
GENERIC_ERROR_MESSAGE = "Failed to generate web scraper file"


def deliver_artifact(
    text: str,
    surface: DownloadSurface,
    filename: str = DOWNLOAD_FILENAME,
) -> DownloadArtifact:
    """Wrap response text as a plain-text file and offer it for download.

    Args:
        text: The generated file content, passed through unchanged
        surface: Where the file is offered
        filename: Suggested download filename (default: webscraper.txt)

    Returns:
        The artifact that was offered
    """
    artifact = DownloadArtifact(
        filename=filename,
        media_type=DOWNLOAD_MEDIA_TYPE,
        content=text.encode("utf-8"),
    )
    surface.offer(artifact)
    return artifact


def success_notification() -> Notification:
    """Notification shown after a file was delivered."""
    return Notification(title=SUCCESS_TITLE, description=SUCCESS_MESSAGE)


def failure_notification(error: BaseException) -> Notification:
    """Notification for a failed submission.

    Known generation errors show their own message; anything else gets the
    generic message so internals are not leaked to the user.
    """
    if isinstance(error, GenerationError):
        description = error.message
    else:
        description = GENERIC_ERROR_MESSAGE
    return Notification(title=ERROR_TITLE, description=description, variant="destructive")
