# =============================================================================
# app/routers/products.py - Product Pages
# =============================================================================
# List, create, edit and delete products. Create and edit accept an
# optional image file which the client forwards as multipart form data.
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from app.dependencies import ApiClientDep
from app.exceptions import EntityNotFoundError
from app.flash import flash
from app.forms import GENERAL_ERROR, form_errors, form_values, read_upload
from app.templating import render
from core.models import ProductForm
from lib.retail_api_client import RetailApiError
from lib.utils import is_blank

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_URL = "/products"


def _form_page(
    request: Request,
    mode: str,
    values: dict[str, Any],
    errors: dict[str, str] | None = None,
    product_id: str | None = None,
):
    action = f"{LIST_URL}/create" if mode == "create" else f"{LIST_URL}/{product_id}/edit"
    return render(
        request,
        "products/form.html",
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
async def list_products(request: Request, api: ApiClientDep):
    result = await api.fetch_products()
    if not result.ok:
        flash(request, "error", "Unable to load products.")

    return render(request, "products/index.html", {"products": result.value or []})


# =============================================================================
# Create
# =============================================================================

@router.get("/create")
async def create_product_form(request: Request):
    return _form_page(request, "create", {})


@router.post("/create")
async def create_product(request: Request, api: ApiClientDep):
    form_data = await request.form()
    values = form_values(form_data)

    try:
        form = ProductForm.model_validate(values)
    except ValidationError as e:
        return _form_page(request, "create", values, form_errors(e))

    try:
        image = await read_upload(form_data.get("image_file"))
        saved = await api.create_product(form.to_product(), image)
    except RetailApiError as e:
        return _form_page(request, "create", values, {GENERAL_ERROR: f"Error creating product: {e.message}"})
    except Exception as e:
        logger.exception(f"Unexpected error creating product: {e}")
        return _form_page(request, "create", values, {GENERAL_ERROR: f"Error creating product: {e}"})

    flash(request, "success", f"Product '{saved.product_name}' created successfully!")
    return RedirectResponse(LIST_URL, status_code=303)


# =============================================================================
# Edit
# =============================================================================

@router.get("/{product_id}/edit")
async def edit_product_form(request: Request, product_id: str, api: ApiClientDep):
    if is_blank(product_id):
        raise EntityNotFoundError("Product", product_id)

    product = await api.get_product(product_id)
    if product is None:
        raise EntityNotFoundError("Product", product_id)

    return _form_page(request, "edit", product.model_dump(), product_id=product_id)


@router.post("/{product_id}/edit")
async def edit_product(request: Request, product_id: str, api: ApiClientDep):
    form_data = await request.form()
    values = form_values(form_data)

    try:
        form = ProductForm.model_validate(values)
    except ValidationError as e:
        return _form_page(request, "edit", values, form_errors(e), product_id)

    try:
        image = await read_upload(form_data.get("image_file"))
        updated = await api.update_product(product_id, form.to_product(product_id), image)
    except RetailApiError as e:
        return _form_page(
            request, "edit", values, {GENERAL_ERROR: f"Error updating product: {e.message}"}, product_id
        )
    except Exception as e:
        logger.exception(f"Unexpected error updating product {product_id}: {e}")
        return _form_page(request, "edit", values, {GENERAL_ERROR: f"Error updating product: {e}"}, product_id)

    flash(request, "success", f"Product '{updated.product_name}' updated successfully!")
    return RedirectResponse(LIST_URL, status_code=303)


# =============================================================================
# Delete
# =============================================================================

@router.post("/{product_id}/delete")
async def delete_product(request: Request, product_id: str, api: ApiClientDep):
    if is_blank(product_id):
        flash(request, "error", "Invalid product ID.")
        return RedirectResponse(LIST_URL, status_code=303)

    try:
        await api.delete_product(product_id)
        flash(request, "success", "Product deleted successfully!")
    except Exception as e:
        logger.error(f"Error deleting product {product_id}: {e}")
        flash(request, "error", f"Error deleting product: {e}")

    return RedirectResponse(LIST_URL, status_code=303)
