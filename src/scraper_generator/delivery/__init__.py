"""Delivery of generated files and user feedback.

The delivery module follows the same surface -> service split as the
providers module:
- surfaces.py: receivers for downloads and notifications
- service.py: building the artifact and the success/failure notifications
"""

from scraper_generator.delivery.service import (
    DOWNLOAD_FILENAME,
    DOWNLOAD_MEDIA_TYPE,
    deliver_artifact,
    failure_notification,
    success_notification,
)
from scraper_generator.delivery.surfaces import (
    CollectingNotifier,
    DownloadArtifact,
    DownloadSurface,
    LoggingNotifier,
    MemoryDownload,
    NotificationSurface,
)

__all__ = [
    # Surfaces
    "DownloadArtifact",
    "DownloadSurface",
    "NotificationSurface",
    "MemoryDownload",
    "CollectingNotifier",
    "LoggingNotifier",
    # Service functions
    "DOWNLOAD_FILENAME",
    "DOWNLOAD_MEDIA_TYPE",
    "deliver_artifact",
    "failure_notification",
    "success_notification",
]
