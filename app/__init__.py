# =============================================================================
# app/ - FastAPI Web Application Package
# =============================================================================
# This package contains the web front end:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - routers/: Page and JSON endpoints organized by resource
# - templates/: Jinja2 views
# - flash.py, forms.py, templating.py: Request/response helpers
#
# The app layer is thin - it handles HTTP concerns and delegates every read
# and write to the Functions API through lib/retail_api_client.py.
# =============================================================================
