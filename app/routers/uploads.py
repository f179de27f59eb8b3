# =============================================================================
# app/routers/uploads.py - Proof of Payment Upload
# =============================================================================
# Customers' payment slips are forwarded to the Functions API, optionally
# tagged with an order id and customer name. Nothing is stored locally.
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from app.dependencies import ApiClientDep
from app.flash import flash
from app.forms import GENERAL_ERROR, form_values, read_upload
from app.templating import render

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_URL = "/uploads"


def _upload_page(request: Request, values: dict[str, Any], errors: dict[str, str] | None = None):
    return render(
        request,
        "uploads/index.html",
        {"values": values, "errors": errors or {}},
    )


@router.get("")
async def upload_form(request: Request, order_id: str | None = None):
    """Upload page. ?order_id= pre-fills the order field (linked from order details)."""
    return _upload_page(request, {"order_id": order_id})


@router.post("")
async def upload_proof_of_payment(request: Request, api: ApiClientDep):
    form_data = await request.form()
    values = form_values(form_data)

    try:
        file = await read_upload(form_data.get("proof_of_payment"))
        if file is None:
            return _upload_page(request, values, {"proof_of_payment": "Please select a file to upload."})

        stored_name = await api.upload_proof_of_payment(
            file,
            order_id=values.get("order_id"),
            customer_name=values.get("customer_name"),
        )
    except Exception as e:
        logger.error(f"Error uploading proof of payment: {e}")
        return _upload_page(request, values, {GENERAL_ERROR: f"Error uploading file: {e}"})

    flash(request, "success", f"Proof of payment uploaded: {stored_name}")
    return RedirectResponse(UPLOAD_URL, status_code=303)
