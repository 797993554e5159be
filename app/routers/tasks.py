# =============================================================================
# app/routers/tasks.py - Task Endpoints
# =============================================================================
# Maps HTTP requests onto TaskService calls. Mounted at /api/tasks.
#
# Handlers are plain `def` functions: FastAPI runs them in its threadpool,
# so each request blocks one worker for its store round trip.
#
# Fixed paths (/top, /search) are declared before /{task_id}.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query, Response, status

from app.config import settings
from app.dependencies import TaskServiceDep
from app.exceptions import TaskNotFoundError
from core.models.task import Task, TaskCreate

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[Task])
def get_all_tasks(service: TaskServiceDep):
    """
    List all tasks.

    Order is whatever the store returns; use /top for newest first.
    """
    return service.get_all_tasks()


@router.get("/top", response_model=list[Task])
def get_top_n_tasks(
    service: TaskServiceDep,
    n: Annotated[int, Query(description="Maximum number of tasks to return")] = settings.TOP_N_DEFAULT,
):
    """
    Get the most recently created tasks, newest first.

    Returns at most `n` tasks. `n` of zero or less returns an empty list.
    A non-numeric `n` is rejected with 400.
    """
    return service.get_top_n_tasks(n)


@router.get("/search", response_model=list[Task])
def search_tasks(
    service: TaskServiceDep,
    term: Annotated[str, Query(description="Text to look for in task titles")],
):
    """
    Search tasks by title.

    Case-insensitive partial match: `GET /api/tasks/search?term=foo`
    returns every task whose title contains "foo", "FOO", "Foo", ...
    An empty term returns every task with a title.
    """
    return service.search_tasks_by_title(term)


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(service: TaskServiceDep, request: TaskCreate):
    """
    Create a new task.

    Only `title` is read from the body; the id is assigned by the store.
    """
    task = service.add_task(request.title)
    logger.info(f"Task created via API: {task.id}")
    return task


@router.get("/{task_id}", response_model=Task)
def get_task(
    service: TaskServiceDep,
    task_id: Annotated[str, Path(description="Task ID")],
):
    """Get a single task by ID."""
    task = service.get_task_by_id(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def mark_task_done(
    service: TaskServiceDep,
    task_id: Annotated[str, Path(description="Task ID")],
):
    """
    Mark a task as done.

    Done tasks are deleted, not flagged. Returns 204 when the task was
    removed, 404 when no such task exists (including one already done).
    """
    if not service.mark_done(task_id):
        raise TaskNotFoundError(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
