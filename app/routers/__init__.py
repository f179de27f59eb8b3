# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - home.py: Landing page
# - customers.py: Customer list/create/edit/delete pages
# - products.py: Product pages (with optional image upload)
# - orders.py: Order pages plus the price lookup and status JSON endpoints
# - uploads.py: Proof of payment upload page
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import home
from . import customers
from . import products
from . import orders
from . import uploads

__all__ = [
    "health",
    "home",
    "customers",
    "products",
    "orders",
    "uploads",
]
