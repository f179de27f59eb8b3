# =============================================================================
# core/ - Domain Models Package
# =============================================================================
# This package contains framework-agnostic models:
# - models/: Pydantic schemas for entities, wire DTOs and form input
#
# Code in this package should NOT import from FastAPI or httpx.
# This keeps the models testable and reusable.
# =============================================================================
