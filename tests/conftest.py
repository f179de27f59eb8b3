# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Backs the API client with an in-memory Functions API (tests/fakes.py)
# - Provides a TestClient wired to that client
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("FUNCTIONS_BASE_URL", "http://functions.test/api")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_api_client
from app.main import app
from lib.retail_api_client import MAX_UPLOAD_BYTES, RetailApiClient, create_http_client
from tests.fakes import FakeFunctionsApi

BASE_URL = "http://functions.test/api"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_api():
    """Empty in-memory Functions API."""
    return FakeFunctionsApi()


@pytest.fixture
def max_upload_bytes():
    """Upload limit for the client under test. Override to keep files small."""
    return MAX_UPLOAD_BYTES


@pytest.fixture
def api_client(fake_api, max_upload_bytes):
    """RetailApiClient talking to fake_api over httpx.MockTransport."""
    http = create_http_client(BASE_URL, transport=httpx.MockTransport(fake_api))
    return RetailApiClient(http, max_upload_bytes=max_upload_bytes)


@pytest.fixture
def client(api_client):
    """FastAPI TestClient whose routes use api_client."""
    app.dependency_overrides[get_api_client] = lambda: api_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_api(fake_api):
    """Functions API with one customer, two products and two orders."""
    fake_api.add_customer("c-1")
    fake_api.add_product("p-1", productName="Kettle", price=349.99, stockAvailable=10)
    fake_api.add_product("p-2", productName="Toaster", price=499.00, stockAvailable=3)
    fake_api.add_order("o-1", orderDateUtc="2024-03-01T09:00:00Z", productName="Kettle")
    fake_api.add_order("o-2", orderDateUtc="2024-03-05T14:30:00Z", productName="Toaster", productId="p-2")
    return fake_api
