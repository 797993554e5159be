# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .task_store import TaskStore
from .task_service import TaskService

__all__ = [
    "TaskStore",
    "TaskService",
]
