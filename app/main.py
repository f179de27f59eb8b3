# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the ABC Retailers web app.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# The app renders HTML pages over the Functions API; it has no database of
# its own.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from app.config import settings
from app.exceptions import (
    RetailersException,
    retailers_exception_handler,
    unexpected_exception_handler,
)
from app.routers import customers, health, home, orders, products, uploads
from lib.retail_api_client import create_http_client

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: Open the shared HTTP client for the Functions API
    - Shutdown: Close it (drains the connection pool)
    """
    logger.info(f"Starting ABC Retailers web app in {settings.ENVIRONMENT} mode")
    logger.info(f"Functions API: {settings.FUNCTIONS_BASE_URL}")

    app.state.http_client = create_http_client(
        settings.FUNCTIONS_BASE_URL,
        api_key=settings.FUNCTIONS_API_KEY,
        timeout=settings.API_TIMEOUT_SECONDS,
    )

    yield

    logger.info("Shutting down ABC Retailers web app")
    await app.state.http_client.aclose()


# Create FastAPI application
app = FastAPI(
    title="ABC Retailers",
    description="Customer, product and order management over the ABC Retailers Functions API.",
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Customers", "description": "Customer pages"},
        {"name": "Products", "description": "Product pages"},
        {"name": "Orders", "description": "Order pages and lookups"},
        {"name": "Uploads", "description": "Proof of payment uploads"},
        {"name": "Health", "description": "Health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# Signed cookie session - carries flash messages across redirects
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    same_site="lax",
    https_only=settings.is_production,
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(RetailersException)
async def handle_retailers_exception(request: Request, exc: RetailersException):
    """Handle page-level errors (not found, etc.)."""
    return await retailers_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Static Files
# =============================================================================

static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


# =============================================================================
# Routers
# =============================================================================

app.include_router(home.router, tags=["Home"])
app.include_router(health.router, tags=["Health"])
app.include_router(customers.router, prefix="/customers", tags=["Customers"])
app.include_router(products.router, prefix="/products", tags=["Products"])
app.include_router(orders.router, prefix="/orders", tags=["Orders"])
app.include_router(uploads.router, prefix="/uploads", tags=["Uploads"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=settings.DEBUG)
