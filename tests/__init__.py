# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the ABC Retailers web app:
# - test_models.py: Pydantic model validation and wire mapping
# - test_multipart.py: Multipart body builder
# - test_retail_api_client.py: Functions API client against a fake API
# - test_*_routes.py: Page and JSON endpoints through TestClient
#
# Run tests with: pytest
# =============================================================================
