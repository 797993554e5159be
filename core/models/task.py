# =============================================================================
# core/models/task.py - Task Schemas
# =============================================================================
# These models define the API contract for task operations:
# - TaskCreate: Input for creating a new task
# - Task: Output when returning a task to clients
#
# The store also keeps a server-assigned created_at per row. It is used only
# for ordering and is never part of these models.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """
    Schema for creating a new task.

    Only the title is read from the request body. Any other fields a
    client sends (including an id) are ignored.

    Example:
        {
            "title": "Buy milk"
        }
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(
        ...,
        min_length=1,
        description="Title of the task",
        examples=["Buy milk"],
    )


class Task(BaseModel):
    """
    Schema for returning a task to clients.

    Returned by:
    - POST /api/tasks (the created task)
    - GET /api/tasks, /api/tasks/top, /api/tasks/search (lists)
    - GET /api/tasks/{id}

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "title": "Buy milk"
        }
    """

    model_config = ConfigDict(extra="ignore")

    # Assigned by the store on creation, opaque to the service
    id: str = Field(..., description="Store-assigned task identifier")

    # Legacy rows may carry a null title
    title: str | None = Field(default=None, description="Title of the task")

    @classmethod
    def from_db_row(cls, row: dict[str, Any]) -> "Task":
        """Create a Task from a task table row, dropping created_at."""
        return cls(id=str(row["id"]), title=row.get("title"))
