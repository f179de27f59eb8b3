# =============================================================================
# lib/retail_api_client.py - Functions API Client
# =============================================================================
# Typed async wrapper over the remote retail API. Every customer, product
# and order operation the web app performs goes through this class; the app
# itself stores nothing.
#
# Failure policy:
# - Reads (list_*, fetch_*, get_*, find_*) never raise. list_* degrades to
#   [], get_* degrades to None, fetch_* and find_* return an ApiResult
#   carrying the error kind.
# - Writes (create_*, update_*, delete_*, upload_*) log and re-raise
#   RetailApiError so the caller decides how to present the failure.
#
# get_* returns None both for 404 and for any other failure. Use find_*
# when the caller needs to tell the two apart.
#
# Usage:
#   http = create_http_client(settings.FUNCTIONS_BASE_URL, settings.FUNCTIONS_API_KEY)
#   api = RetailApiClient(http)
#   customers = await api.list_customers()
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter

from core.models import Customer, Order, OrderDto, Product, UploadedFile
from lib.multipart import MultipartForm
from lib.utils import ApplicationError, is_blank

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

# -----------------------------------------------------------------------------
# Routes (relative to the client's base_url)
# -----------------------------------------------------------------------------

CUSTOMERS_ROUTE = "customers"
PRODUCTS_ROUTE = "products"
ORDERS_ROUTE = "orders"
UPLOADS_ROUTE = "uploads/proof-of-payment"

MAX_UPLOAD_BYTES = 50 * 1024 * 1024

FUNCTIONS_KEY_HEADER = "x-functions-key"


# =============================================================================
# Errors & Results
# =============================================================================

class ApiErrorKind(str, Enum):
    """
    Why a call to the Functions API failed.

    - not_found: The API answered 404
    - validation: The API rejected the input (400/409/422) or a local limit
      was exceeded
    - transport: Connection failure, timeout, or any other non-2xx status
    - deserialization: The response body wasn't the JSON we expected
    - unknown: Anything else
    """
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    TRANSPORT = "transport"
    DESERIALIZATION = "deserialization"
    UNKNOWN = "unknown"


class RetailApiError(ApplicationError):
    """Raised by write operations when the Functions API call fails."""

    def __init__(
        self,
        message: str,
        kind: ApiErrorKind = ApiErrorKind.UNKNOWN,
        status_code: int | None = None,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            code=f"API_{kind.name}",
            suggestion=suggestion,
            details=details,
        )
        self.kind = kind
        self.status_code = status_code


class FileTooLargeError(RetailApiError):
    """Raised before sending a file larger than the upload limit."""

    def __init__(self, filename: str, size_bytes: int, max_bytes: int = MAX_UPLOAD_BYTES):
        max_mb = max_bytes // (1024 * 1024)
        super().__init__(
            f"File exceeds maximum allowed size ({max_mb} MB).",
            kind=ApiErrorKind.VALIDATION,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"filename": filename, "size_bytes": size_bytes, "max_bytes": max_bytes},
        )


@dataclass
class ApiResult(Generic[T]):
    """
    Outcome of a read: either a value or an error kind, never both.

    Example:
        result = await api.find_order(order_id)
        if result.not_found:
            raise EntityNotFoundError("Order", order_id)
        if not result.ok:
            flash(request, "error", "Unable to load order details.")
    """

    value: T | None = None
    error: ApiErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def not_found(self) -> bool:
        return self.error is ApiErrorKind.NOT_FOUND

    @classmethod
    def success(cls, value: T) -> ApiResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ApiErrorKind, message: str | None = None) -> ApiResult[T]:
        return cls(error=kind, message=message)


# =============================================================================
# HTTP Client Factory
# =============================================================================

def create_http_client(
    base_url: str,
    api_key: str | None = None,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build the shared AsyncClient for the Functions API.

    base_url gets a trailing slash so relative routes append to its path
    ("https://host/api" + "customers" -> "https://host/api/customers").
    """
    headers = {"Accept": "application/json"}
    if api_key:
        headers[FUNCTIONS_KEY_HEADER] = api_key

    return httpx.AsyncClient(
        base_url=base_url.rstrip("/") + "/",
        headers=headers,
        timeout=timeout,
        transport=transport,
    )


# =============================================================================
# Client
# =============================================================================

class RetailApiClient:
    """
    Typed facade over the Functions API.

    Holds no state besides the shared httpx.AsyncClient, which owns the
    connection pool.
    """

    def __init__(self, http: httpx.AsyncClient, max_upload_bytes: int = MAX_UPLOAD_BYTES):
        self._http = http
        self._max_upload_bytes = max_upload_bytes

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _path(route: str, entity_id: str, *suffix: str) -> str:
        return "/".join([route, quote(entity_id, safe=""), *suffix])

    @staticmethod
    def _kind_for_status(status_code: int) -> ApiErrorKind:
        if status_code == 404:
            return ApiErrorKind.NOT_FOUND
        if status_code in (400, 409, 422):
            return ApiErrorKind.VALIDATION
        return ApiErrorKind.TRANSPORT

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Issue a request, turning httpx transport errors into RetailApiError."""
        try:
            return await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise RetailApiError(
                f"Request to {method} {url} failed: {e}",
                kind=ApiErrorKind.TRANSPORT,
                suggestion="Check FUNCTIONS_BASE_URL and that the Functions API is running",
            ) from e

    def _ensure_success(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        request = response.request
        raise RetailApiError(
            f"{request.method} {request.url.path} returned {response.status_code}",
            kind=self._kind_for_status(response.status_code),
            status_code=response.status_code,
            details={"body": response.text[:500]},
        )

    @staticmethod
    def _decode(response: httpx.Response, adapter: TypeAdapter[T]) -> T:
        try:
            return adapter.validate_json(response.content)
        except ValueError as e:
            raise RetailApiError(
                f"Unexpected response body from {response.request.url.path}: {e}",
                kind=ApiErrorKind.DESERIALIZATION,
                status_code=response.status_code,
            ) from e

    def _decode_or(self, response: httpx.Response, model: type[M], fallback: M) -> M:
        """Decode a write response, keeping the submitted value if that fails."""
        try:
            return self._decode(response, TypeAdapter(model))
        except RetailApiError as e:
            logger.warning(f"Falling back to submitted {model.__name__}: {e}")
            return fallback

    async def _write(self, method: str, url: str, action: str, **kwargs: Any) -> httpx.Response:
        """Send a mutating request. Logs and re-raises on any failure."""
        try:
            response = await self._send(method, url, **kwargs)
            self._ensure_success(response)
            return response
        except RetailApiError as e:
            logger.error(f"Error {action}: {e}")
            raise

    async def _fetch_all(
        self,
        route: str,
        model: type[M],
        label: str,
    ) -> ApiResult[list[M]]:
        try:
            response = await self._send("GET", route)
            self._ensure_success(response)
            return ApiResult.success(self._decode(response, TypeAdapter(list[model])))
        except RetailApiError as e:
            logger.error(f"Error fetching {label}: {e}")
            return ApiResult.failure(e.kind, e.message)

    async def _find(
        self,
        route: str,
        entity_id: str,
        model: type[M],
        label: str,
    ) -> ApiResult[M]:
        if is_blank(entity_id):
            return ApiResult.failure(ApiErrorKind.NOT_FOUND, f"{label} id is blank")

        try:
            response = await self._send("GET", self._path(route, entity_id))
            if response.status_code == 404:
                logger.info(f"{label} not found: {entity_id}")
                return ApiResult.failure(ApiErrorKind.NOT_FOUND, f"{label} not found: {entity_id}")
            self._ensure_success(response)
            return ApiResult.success(self._decode(response, TypeAdapter(model)))
        except RetailApiError as e:
            logger.error(f"Error fetching {label} with ID {entity_id}: {e}")
            return ApiResult.failure(e.kind, e.message)

    def _ensure_within_limit(self, file: UploadedFile | None, action: str) -> None:
        if file is None or file.is_empty:
            return
        if file.size > self._max_upload_bytes:
            error = FileTooLargeError(file.filename, file.size, self._max_upload_bytes)
            logger.error(f"Error {action}: {error}")
            raise error

    @staticmethod
    def _map_result(result: ApiResult[Any], convert: Callable[[Any], T]) -> ApiResult[T]:
        if not result.ok or result.value is None:
            return ApiResult.failure(result.error or ApiErrorKind.UNKNOWN, result.message)
        return ApiResult.success(convert(result.value))

    # -------------------------------------------------------------------------
    # Customers
    # -------------------------------------------------------------------------

    async def fetch_customers(self) -> ApiResult[list[Customer]]:
        return await self._fetch_all(CUSTOMERS_ROUTE, Customer, "customers")

    async def list_customers(self) -> list[Customer]:
        return (await self.fetch_customers()).value or []

    async def find_customer(self, customer_id: str) -> ApiResult[Customer]:
        return await self._find(CUSTOMERS_ROUTE, customer_id, Customer, "Customer")

    async def get_customer(self, customer_id: str) -> Customer | None:
        return (await self.find_customer(customer_id)).value

    async def create_customer(self, customer: Customer) -> Customer:
        response = await self._write(
            "POST",
            CUSTOMERS_ROUTE,
            f"creating customer {customer.name}",
            json=customer.to_payload(),
        )
        return self._decode_or(response, Customer, customer)

    async def update_customer(self, customer_id: str, customer: Customer) -> Customer:
        response = await self._write(
            "PUT",
            self._path(CUSTOMERS_ROUTE, customer_id),
            f"updating customer {customer_id}",
            json=customer.to_payload(),
        )
        return self._decode_or(response, Customer, customer)

    async def delete_customer(self, customer_id: str) -> None:
        await self._write(
            "DELETE",
            self._path(CUSTOMERS_ROUTE, customer_id),
            f"deleting customer {customer_id}",
        )

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    async def fetch_products(self) -> ApiResult[list[Product]]:
        return await self._fetch_all(PRODUCTS_ROUTE, Product, "products")

    async def list_products(self) -> list[Product]:
        return (await self.fetch_products()).value or []

    async def find_product(self, product_id: str) -> ApiResult[Product]:
        return await self._find(PRODUCTS_ROUTE, product_id, Product, "Product")

    async def get_product(self, product_id: str) -> Product | None:
        return (await self.find_product(product_id)).value

    async def create_product(self, product: Product, image: UploadedFile | None = None) -> Product:
        action = f"creating product {product.product_name}"
        self._ensure_within_limit(image, action)
        response = await self._write(
            "POST",
            PRODUCTS_ROUTE,
            action,
            files=self._product_form(product, image).to_files(),
        )
        return self._decode_or(response, Product, product)

    async def update_product(
        self,
        product_id: str,
        product: Product,
        image: UploadedFile | None = None,
    ) -> Product:
        action = f"updating product {product_id}"
        self._ensure_within_limit(image, action)
        response = await self._write(
            "PUT",
            self._path(PRODUCTS_ROUTE, product_id),
            action,
            files=self._product_form(product, image).to_files(),
        )
        return self._decode_or(response, Product, product)

    async def delete_product(self, product_id: str) -> None:
        await self._write(
            "DELETE",
            self._path(PRODUCTS_ROUTE, product_id),
            f"deleting product {product_id}",
        )

    @staticmethod
    def _product_form(product: Product, image: UploadedFile | None) -> MultipartForm:
        return (
            MultipartForm()
            .add_field("ProductName", product.product_name)
            .add_field("Description", product.description or "")
            .add_field("Price", format(product.price, "f"))
            .add_field("StockAvailable", product.stock_available)
            .add_optional_field("ImageUrl", product.image_url)
            .add_file("ImageFile", image)
        )

    # -------------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------------

    async def fetch_orders(self) -> ApiResult[list[Order]]:
        result = await self._fetch_all(ORDERS_ROUTE, OrderDto, "orders")
        return self._map_result(result, lambda dtos: [dto.to_order() for dto in dtos])

    async def list_orders(self) -> list[Order]:
        return (await self.fetch_orders()).value or []

    async def find_order(self, order_id: str) -> ApiResult[Order]:
        result = await self._find(ORDERS_ROUTE, order_id, OrderDto, "Order")
        return self._map_result(result, OrderDto.to_order)

    async def get_order(self, order_id: str) -> Order | None:
        return (await self.find_order(order_id)).value

    async def create_order(self, customer_id: str, product_id: str, quantity: int) -> Order:
        """
        Place an order.

        The API prices the order, decrements stock and sets the timestamp.
        Unlike the other writes, an undecodable success body is an error
        here: there is no local value to fall back to.
        """
        action = f"creating order for customer {customer_id}"
        payload = {"customerId": customer_id, "productId": product_id, "quantity": quantity}
        response = await self._write("POST", ORDERS_ROUTE, action, json=payload)

        try:
            dto = self._decode(response, TypeAdapter(OrderDto))
        except RetailApiError as e:
            logger.error(f"Error {action}: {e}")
            raise RetailApiError(
                "Failed to create order.",
                kind=ApiErrorKind.DESERIALIZATION,
                status_code=response.status_code,
            ) from e

        logger.info(f"Created order {dto.id} for customer {customer_id}")
        return dto.to_order()

    async def update_order_status(self, order_id: str, new_status: str) -> None:
        await self._write(
            "PATCH",
            self._path(ORDERS_ROUTE, order_id, "status"),
            f"updating order status for {order_id}",
            json={"status": new_status},
        )

    async def delete_order(self, order_id: str) -> None:
        await self._write(
            "DELETE",
            self._path(ORDERS_ROUTE, order_id),
            f"deleting order {order_id}",
        )

    # -------------------------------------------------------------------------
    # Uploads
    # -------------------------------------------------------------------------

    async def upload_proof_of_payment(
        self,
        file: UploadedFile,
        order_id: str | None = None,
        customer_name: str | None = None,
    ) -> str:
        """
        Forward a proof-of-payment file.

        Returns the file name the API stored it under, or the original name
        when the response doesn't say.
        """
        action = f"uploading proof of payment for order {order_id}"
        self._ensure_within_limit(file, action)

        form = (
            MultipartForm()
            .add_file("ProofOfPayment", file)
            .add_optional_field("OrderId", order_id)
            .add_optional_field("CustomerName", customer_name)
        )
        response = await self._write("POST", UPLOADS_ROUTE, action, files=form.to_files())

        try:
            body = self._decode(response, TypeAdapter(dict[str, Any]))
        except RetailApiError as e:
            logger.warning(f"Upload response not understood, keeping original name: {e}")
            return file.filename

        stored_name = body.get("fileName")
        return stored_name if isinstance(stored_name, str) and stored_name else file.filename
