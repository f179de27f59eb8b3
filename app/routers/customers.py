# =============================================================================
# app/routers/customers.py - Customer Pages
# =============================================================================
# List, create, edit and delete customers. All data lives in the Functions
# API; these handlers validate the form, call the client and pick the next
# page.
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from app.dependencies import ApiClientDep
from app.exceptions import EntityNotFoundError
from app.flash import flash
from app.forms import GENERAL_ERROR, form_errors, form_values
from app.templating import render
from core.models import CustomerForm
from lib.retail_api_client import RetailApiError
from lib.utils import is_blank

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_URL = "/customers"


def _form_page(
    request: Request,
    mode: str,
    values: dict[str, Any],
    errors: dict[str, str] | None = None,
    customer_id: str | None = None,
):
    action = f"{LIST_URL}/create" if mode == "create" else f"{LIST_URL}/{customer_id}/edit"
    return render(
        request,
        "customers/form.html",
        {
            "mode": mode,
            "action": action,
            "values": values,
            "errors": errors or {},
        },
    )


# =============================================================================
# List
# =============================================================================

@router.get("")
async def list_customers(request: Request, api: ApiClientDep):
    """Customer list. Shows an empty table and an error banner if the API is down."""
    result = await api.fetch_customers()
    if not result.ok:
        flash(request, "error", "Unable to load customers.")

    return render(request, "customers/index.html", {"customers": result.value or []})


# =============================================================================
# Create
# =============================================================================

@router.get("/create")
async def create_customer_form(request: Request):
    return _form_page(request, "create", {})


@router.post("/create")
async def create_customer(request: Request, api: ApiClientDep):
    values = form_values(await request.form())

    try:
        form = CustomerForm.model_validate(values)
    except ValidationError as e:
        return _form_page(request, "create", values, form_errors(e))

    try:
        await api.create_customer(form.to_customer())
    except RetailApiError as e:
        return _form_page(request, "create", values, {GENERAL_ERROR: f"Error creating customer: {e.message}"})
    except Exception as e:
        logger.exception(f"Unexpected error creating customer: {e}")
        return _form_page(request, "create", values, {GENERAL_ERROR: f"Unexpected error: {e}"})

    flash(request, "success", "Customer created successfully!")
    return RedirectResponse(LIST_URL, status_code=303)


# =============================================================================
# Edit
# =============================================================================

@router.get("/{customer_id}/edit")
async def edit_customer_form(request: Request, customer_id: str, api: ApiClientDep):
    if is_blank(customer_id):
        raise EntityNotFoundError("Customer", customer_id)

    customer = await api.get_customer(customer_id)
    if customer is None:
        raise EntityNotFoundError("Customer", customer_id)

    return _form_page(request, "edit", customer.model_dump(), customer_id=customer_id)


@router.post("/{customer_id}/edit")
async def edit_customer(request: Request, customer_id: str, api: ApiClientDep):
    values = form_values(await request.form())

    try:
        form = CustomerForm.model_validate(values)
    except ValidationError as e:
        return _form_page(request, "edit", values, form_errors(e), customer_id)

    try:
        await api.update_customer(customer_id, form.to_customer(customer_id))
    except RetailApiError as e:
        return _form_page(
            request, "edit", values, {GENERAL_ERROR: f"Error updating customer: {e.message}"}, customer_id
        )
    except Exception as e:
        logger.exception(f"Unexpected error updating customer {customer_id}: {e}")
        return _form_page(request, "edit", values, {GENERAL_ERROR: f"Unexpected error: {e}"}, customer_id)

    flash(request, "success", "Customer updated successfully!")
    return RedirectResponse(LIST_URL, status_code=303)


# =============================================================================
# Delete
# =============================================================================

@router.post("/{customer_id}/delete")
async def delete_customer(request: Request, customer_id: str, api: ApiClientDep):
    """Delete, then always go back to the list."""
    if is_blank(customer_id):
        flash(request, "error", "Invalid customer ID.")
        return RedirectResponse(LIST_URL, status_code=303)

    try:
        await api.delete_customer(customer_id)
        flash(request, "success", "Customer deleted successfully!")
    except RetailApiError as e:
        flash(request, "error", f"Error deleting customer: {e.message}")
    except Exception as e:
        logger.exception(f"Unexpected error deleting customer {customer_id}: {e}")
        flash(request, "error", f"Unexpected error: {e}")

    return RedirectResponse(LIST_URL, status_code=303)
