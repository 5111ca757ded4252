"""Business logic for generating a web scraper file."""

from __future__ import annotations

import logging
import time

from pydantic import ValidationError

from scraper_generator.admin.service import get_config
from scraper_generator.core.providers import get_provider
from scraper_generator.core.request_builder import API_KEY_PARAM, build_relay_url
from scraper_generator.delivery import (
    DownloadSurface,
    NotificationSurface,
    deliver_artifact,
    failure_notification,
    success_notification,
)
from scraper_generator.errors import GenerationError
from scraper_generator.metrics import record_request
from scraper_generator.models import FormInput, Notification, UIState
from scraper_generator.providers import TextProvider
from scraper_generator.utils import mask_query_param, normalize_domain

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please enter a website URL"


def relay_url_for(form: FormInput) -> str:
    """Build the dispatchable relay URL for a form submission.

    Args:
        form: The submitted form values

    Returns:
        Relay URL wrapping the upstream service URL, using the runtime config
    """
    domain = normalize_domain(form.website_url)
    return build_relay_url(
        domain,
        full_version=form.full_version,
        api_key=form.api_key,
        base_url=get_config("upstream_base_url"),
        relay_base_url=get_config("relay_base_url"),
    )


async def run_pipeline(
    form: FormInput,
    *,
    downloads: DownloadSurface,
    notifier: NotificationSurface,
    state: UIState | None = None,
    provider: TextProvider | None = None,
) -> Notification:
    """Run one submission from raw form values to a delivered file.

    Every failure is converted into a single destructive notification; this
    function does not raise for request or response problems. The loading
    flag is set for the whole run and cleared exactly once at the end.

    Args:
        form: The submitted form values
        downloads: Surface that receives the generated file on success
        notifier: Surface that receives the success or failure notification
        state: Loading state of the caller (a fresh one is used if omitted)
        provider: Text provider override (default: provider for the relay URL)

    Returns:
        The notification that was emitted
    """
    if state is None:
        state = UIState()
    state.is_loading = True

    domain = ""
    start = time.perf_counter()
    try:
        domain = normalize_domain(form.website_url)
        relay_url = relay_url_for(form)
        logger.info(f"Requesting: {mask_query_param(relay_url, API_KEY_PARAM)}")

        fetcher = provider or get_provider(relay_url)
        result = await fetcher.fetch_text(relay_url, timeout=get_config("request_timeout"))

        deliver_artifact(result.content, downloads)
        notification = success_notification()
        notifier.notify(notification)

        record_request(
            domain=domain,
            success=True,
            full_version=form.full_version,
            status_code=result.status_code,
            elapsed_ms=(time.perf_counter() - start) * 1000,
        )
    except Exception as e:
        # Unknown errors keep their traceback in the log
        logger.warning(
            f"Error generating scraper file for {domain!r}: {e}",
            exc_info=not isinstance(e, GenerationError),
        )
        notification = failure_notification(e)
        notifier.notify(notification)

        record_request(
            domain=domain,
            success=False,
            full_version=form.full_version,
            status_code=getattr(e, "status_code", None),
            elapsed_ms=(time.perf_counter() - start) * 1000,
            error=notification.description,
        )
    finally:
        state.is_loading = False

    return notification


def invalid_input_notification(error: ValidationError) -> Notification:
    """Notification for form values that failed validation."""
    fields = sorted({str(err["loc"][0]) for err in error.errors() if err.get("loc")})
    detail = f" (invalid: {', '.join(fields)})" if fields else ""
    return Notification(
        title="Error",
        description=f"{INVALID_INPUT_MESSAGE}{detail}",
        variant="destructive",
    )
