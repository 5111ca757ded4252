"""Form router for serving the generator page and file downloads."""

from pathlib import Path

from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response

from scraper_generator.delivery import CollectingNotifier, MemoryDownload
from scraper_generator.models import FormInput, Notification
from scraper_generator.tools.service import invalid_input_notification, run_pipeline

# Setup template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"


def _error_response(notification: Notification, status_code: int) -> JSONResponse:
    return JSONResponse(
        {
            "status": "error",
            "notification": notification.model_dump(),
        },
        status_code=status_code,
    )


async def generator_form(request: Request) -> HTMLResponse:
    """Serve the generator form.

    Returns:
        HTMLResponse with the form UI
    """
    # Read the template file directly since it's already complete HTML
    template_path = TEMPLATES_DIR / "form.html"
    html_content = template_path.read_text()
    return HTMLResponse(content=html_content)


async def api_generate(request: Request) -> Response:
    """Generate a web scraper file and return it as a download.

    Expects a JSON body with websiteUrl, apiKey and fullVersion.

    Returns:
        text/plain attachment on success, JSON error notification otherwise
    """
    try:
        body = await request.json()
        form = FormInput.model_validate(body)
    except ValueError as e:
        # ValidationError is a ValueError; so is a malformed JSON body
        if isinstance(e, ValidationError):
            notification = invalid_input_notification(e)
        else:
            notification = Notification(
                title="Error", description=f"Invalid JSON body: {e}", variant="destructive"
            )
        return _error_response(notification, status_code=422)

    downloads = MemoryDownload()
    notifier = CollectingNotifier()
    notification = await run_pipeline(form, downloads=downloads, notifier=notifier)

    artifact = downloads.artifact
    if artifact is None:
        return _error_response(notification, status_code=502)

    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{artifact.filename}"',
            "X-Notification-Title": notification.title,
            "X-Notification-Description": notification.description,
        },
    )
