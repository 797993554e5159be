# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - tasks.py: Task create/list/search/top/mark-done endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import tasks

__all__ = [
    "health",
    "tasks",
]
