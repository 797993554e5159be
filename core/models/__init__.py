# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - task.py: Task create/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .task import Task, TaskCreate

__all__ = [
    "Task",
    "TaskCreate",
]
