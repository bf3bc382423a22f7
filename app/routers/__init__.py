# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - home.py: Server-rendered home page
# - users.py: User CRUD endpoints
# - health.py: Health check endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import home
from . import users

__all__ = [
    "health",
    "home",
    "users",
]
