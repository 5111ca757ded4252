"""Download and notification surfaces that receive pipeline output."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from scraper_generator.models.feedback import Notification

logger = logging.getLogger(__name__)


@dataclass
class DownloadArtifact:
    """A file handed to the user for download."""

    filename: str
    media_type: str
    content: bytes

    def text(self) -> str:
        """Decode the artifact content as UTF-8."""
        return self.content.decode("utf-8")


class DownloadSurface(ABC):
    """Abstract receiver for files the user should download."""

    @abstractmethod
    def offer(self, artifact: DownloadArtifact) -> None:
        """Hand a file to the user.

        Args:
            artifact: The file content, media type and suggested filename
        """
        pass


class NotificationSurface(ABC):
    """Abstract receiver for user-facing notifications."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Show a notification. Fire-and-forget."""
        pass


class MemoryDownload(DownloadSurface):
    """Keeps the offered file so a response can be built from it."""

    def __init__(self) -> None:
        self.artifact: DownloadArtifact | None = None

    def offer(self, artifact: DownloadArtifact) -> None:
        self.artifact = artifact


class CollectingNotifier(NotificationSurface):
    """Keeps notifications in the order they were emitted."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None


class LoggingNotifier(CollectingNotifier):
    """Collects notifications and mirrors them to the log.

    Failures are already logged with details where they are caught, so
    destructive notifications are only echoed at DEBUG.
    """

    def notify(self, notification: Notification) -> None:
        super().notify(notification)
        if notification.variant == "destructive":
            logger.debug(f"{notification.title}: {notification.description}")
        else:
            logger.info(f"{notification.title}: {notification.description}")
