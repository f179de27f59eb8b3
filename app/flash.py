# =============================================================================
# app/flash.py - One-Shot Status Messages
# =============================================================================
# Flash messages survive exactly one redirect: a handler stores a message in
# the signed session cookie, and the next rendered page pops it.
#
# Requires Starlette's SessionMiddleware (installed in app/main.py).
#
# Usage:
#   flash(request, "success", "Customer created successfully!")
#   return RedirectResponse("/customers", status_code=303)
# =============================================================================

from typing import Literal

from fastapi import Request

FLASH_SESSION_KEY = "_flashes"

FlashCategory = Literal["success", "error"]


def flash(request: Request, category: FlashCategory, message: str) -> None:
    """Store a message for the next render. A later call replaces an earlier one of the same category."""
    flashes = dict(request.session.get(FLASH_SESSION_KEY, {}))
    flashes[category] = message
    request.session[FLASH_SESSION_KEY] = flashes


def pop_flashes(request: Request) -> dict[str, str]:
    """Return pending messages and clear them."""
    return request.session.pop(FLASH_SESSION_KEY, None) or {}
