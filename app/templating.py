# =============================================================================
# app/templating.py - Jinja2 View Rendering
# =============================================================================
# Every HTML page goes through render(), which hands pending flash messages
# to the template and clears them.
# =============================================================================

from decimal import Decimal
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from app.flash import pop_flashes

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def _money(value: Decimal | float | int | None) -> str:
    if value is None:
        return ""
    return f"R {Decimal(str(value)):,.2f}"


templates.env.filters["money"] = _money


def render(
    request: Request,
    template_name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    """Render a page with the request's flash messages."""
    page_context = {"flashes": pop_flashes(request)}
    page_context.update(context or {})
    return templates.TemplateResponse(
        request,
        template_name,
        page_context,
        status_code=status_code,
    )
