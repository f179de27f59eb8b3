# =============================================================================
# app/routers/orders.py - Order Pages & Lookups
# =============================================================================
# Orders are placed, listed, viewed, re-statused and deleted here.
#
# Placing an order checks two things before calling the API:
# 1. The selected customer and product both exist
# 2. The requested quantity doesn't exceed the product's current stock
#
# Two JSON endpoints back the order pages' scripts:
# - GET  /orders/product-price  -> price/stock for the selected product
# - POST /orders/update-status  -> inline status change from the list
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Form, Query, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from app.dependencies import ApiClientDep
from app.exceptions import EntityNotFoundError
from app.flash import flash
from app.forms import GENERAL_ERROR, form_errors, form_values
from app.templating import render
from core.models import OrderCreateForm, OrderStatus, OrderStatusForm
from lib.retail_api_client import RetailApiClient
from lib.utils import is_blank

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_URL = "/orders"


async def _create_page(
    request: Request,
    api: RetailApiClient,
    values: dict[str, Any],
    errors: dict[str, str] | None = None,
):
    """Order form with customer and product dropdowns filled in."""
    customers = await api.list_customers()
    products = await api.list_products()
    return render(
        request,
        "orders/create.html",
        {
            "values": values,
            "errors": errors or {},
            "customers": customers,
            "products": products,
        },
    )


def _edit_page(
    request: Request,
    order: Any,
    errors: dict[str, str] | None = None,
):
    return render(
        request,
        "orders/edit.html",
        {
            "order": order,
            "statuses": list(OrderStatus),
            "errors": errors or {},
        },
    )


# =============================================================================
# JSON Lookups
# =============================================================================
# Declared before /{order_id} so the literal paths win.

@router.get("/product-price")
async def get_product_price(
    api: ApiClientDep,
    product_id: str = Query("", alias="productId"),
) -> dict[str, Any]:
    """Price and stock for one product, for the order form's live total."""
    product = await api.get_product(product_id)
    if product is None:
        return {"success": False}

    return {
        "success": True,
        "price": float(product.price),
        "stock": product.stock_available,
        "productName": product.product_name,
    }


@router.post("/update-status")
async def update_order_status(
    api: ApiClientDep,
    order_id: str = Form("", alias="id"),
    new_status: str = Form("", alias="newStatus"),
) -> dict[str, Any]:
    """Change an order's status in place. The API validates the value."""
    try:
        await api.update_order_status(order_id, new_status)
        return {"success": True, "message": f"Order status updated to {new_status}"}
    except Exception as e:
        logger.error(f"Error updating order status for {order_id}: {e}")
        return {"success": False, "message": str(e)}


# =============================================================================
# List
# =============================================================================

@router.get("")
async def list_orders(request: Request, api: ApiClientDep):
    """Orders, newest first (sorted here, not trusted to the API)."""
    result = await api.fetch_orders()
    if not result.ok:
        flash(request, "error", "Unable to load orders.")

    orders = sorted(result.value or [], key=lambda o: o.order_date_utc, reverse=True)
    return render(request, "orders/index.html", {"orders": orders})


# =============================================================================
# Create
# =============================================================================

@router.get("/create")
async def create_order_form(request: Request, api: ApiClientDep):
    return await _create_page(request, api, {})


@router.post("/create")
async def create_order(request: Request, api: ApiClientDep):
    values = form_values(await request.form())

    try:
        form = OrderCreateForm.model_validate(values)
    except ValidationError as e:
        return await _create_page(request, api, values, form_errors(e))

    try:
        customer = await api.get_customer(form.customer_id)
        product = await api.get_product(form.product_id)

        if customer is None or product is None:
            return await _create_page(
                request, api, values, {GENERAL_ERROR: "Invalid customer or product selected."}
            )

        if product.stock_available < form.quantity:
            return await _create_page(
                request, api, values, {"quantity": f"Insufficient stock. Available: {product.stock_available}"}
            )

        order = await api.create_order(form.customer_id, form.product_id, form.quantity)
    except Exception as e:
        logger.error(f"Error creating order: {e}")
        return await _create_page(request, api, values, {GENERAL_ERROR: f"Error creating order: {e}"})

    logger.info(f"Order {order.id} placed for customer {form.customer_id}")
    flash(request, "success", "Order created successfully!")
    return RedirectResponse(LIST_URL, status_code=303)


# =============================================================================
# Details
# =============================================================================

@router.get("/{order_id}")
async def order_details(request: Request, order_id: str, api: ApiClientDep):
    if is_blank(order_id):
        raise EntityNotFoundError("Order", order_id)

    result = await api.find_order(order_id)
    if result.not_found:
        raise EntityNotFoundError("Order", order_id)
    if not result.ok:
        flash(request, "error", "Unable to load order details.")
        return RedirectResponse(LIST_URL, status_code=303)

    return render(request, "orders/details.html", {"order": result.value})


# =============================================================================
# Edit (status only)
# =============================================================================

@router.get("/{order_id}/edit")
async def edit_order_form(request: Request, order_id: str, api: ApiClientDep):
    if is_blank(order_id):
        raise EntityNotFoundError("Order", order_id)

    result = await api.find_order(order_id)
    if result.not_found:
        raise EntityNotFoundError("Order", order_id)
    if not result.ok:
        flash(request, "error", "Unable to load order for edit.")
        return RedirectResponse(LIST_URL, status_code=303)

    return _edit_page(request, result.value)


@router.post("/{order_id}/edit")
async def edit_order(request: Request, order_id: str, api: ApiClientDep):
    values = form_values(await request.form())
    order = {"id": order_id, **values}

    try:
        form = OrderStatusForm.model_validate(values)
    except ValidationError as e:
        return _edit_page(request, order, form_errors(e))

    try:
        await api.update_order_status(order_id, form.status.value)
    except Exception as e:
        logger.error(f"Error updating order {order_id}: {e}")
        return _edit_page(request, order, {GENERAL_ERROR: f"Error updating order: {e}"})

    flash(request, "success", "Order updated successfully!")
    return RedirectResponse(LIST_URL, status_code=303)


# =============================================================================
# Delete
# =============================================================================

@router.post("/{order_id}/delete")
async def delete_order(request: Request, order_id: str, api: ApiClientDep):
    if is_blank(order_id):
        flash(request, "error", "Invalid order ID.")
        return RedirectResponse(LIST_URL, status_code=303)

    try:
        await api.delete_order(order_id)
        flash(request, "success", "Order deleted successfully!")
    except Exception as e:
        logger.error(f"Error deleting order {order_id}: {e}")
        flash(request, "error", f"Error deleting order: {e}")

    return RedirectResponse(LIST_URL, status_code=303)
