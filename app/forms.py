# =============================================================================
# app/forms.py - Form Parsing Helpers
# =============================================================================
# Routers read the raw form, validate it with a pydantic model, and on
# failure re-render the page with per-field messages from form_errors().
# =============================================================================

from typing import Any

from pydantic import ValidationError
from starlette.datastructures import FormData, UploadFile

from core.models import UploadedFile

# Key used for messages that aren't tied to a single field
GENERAL_ERROR = "__all__"


def form_values(form: FormData) -> dict[str, Any]:
    """Text fields only; blank optional values become None."""
    values: dict[str, Any] = {}
    for key, value in form.items():
        if isinstance(value, str):
            values[key] = value if value.strip() else None
    return values


def form_errors(exc: ValidationError) -> dict[str, str]:
    """Map a ValidationError to {field: first message}."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else GENERAL_ERROR
        message = error["msg"]
        if error["type"] == "missing" or (error["type"].endswith("_type") and error.get("input") is None):
            message = "This field is required."
        errors.setdefault(field, message)
    return errors


async def read_upload(upload: Any) -> UploadedFile | None:
    """
    Convert an optional form file to UploadedFile.

    Returns None when nothing was attached (browsers send an empty part with
    no filename for an untouched file input).
    """
    if not isinstance(upload, UploadFile) or not upload.filename:
        return None

    content = await upload.read()
    if not content:
        return None

    return UploadedFile(
        filename=upload.filename,
        content=content,
        content_type=upload.content_type,
    )
