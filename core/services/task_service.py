# =============================================================================
# core/services/task_service.py - Task Operations
# =============================================================================
# Thin layer between the API routes and the TaskStore.
# Holds no state and no business rules. Its one job is the error boundary:
# every StorageError from the store leaves here as TaskOperationFailed, so
# routes and tests only ever deal with one error shape.
# =============================================================================

import logging
from collections.abc import Callable
from typing import TypeVar

from app.exceptions import TaskOperationFailed
from core.models.task import Task
from core.services.task_store import TaskStore
from lib.supabase_client import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskService:
    """
    Service for task operations.

    Example:
        service = TaskService(TaskStore(client))
        task = service.add_task("Buy milk")
        service.mark_done(task.id)  # True
    """

    def __init__(self, store: TaskStore):
        self._store = store

    def _call(self, operation: str, func: Callable[[], T]) -> T:
        try:
            return func()
        except StorageError as e:
            logger.error(f"Error during '{operation}': {e}")
            raise TaskOperationFailed(operation, e) from e

    def add_task(self, title: str) -> Task:
        """Create a task and return it with its store-assigned id."""
        return self._call("add task", lambda: self._store.create(title))

    def get_all_tasks(self) -> list[Task]:
        return self._call("get all tasks", self._store.get_all)

    def get_top_n_tasks(self, n: int) -> list[Task]:
        """Return at most n tasks, newest first. n <= 0 gives an empty list."""
        return self._call("get top tasks", lambda: self._store.top_n(n))

    def mark_done(self, task_id: str) -> bool:
        """
        Mark a task as done by deleting it.

        Returns:
            True if the task existed and was removed, False otherwise.
            A second call for the same id returns False.
        """
        return self._call("mark task done", lambda: self._store.delete_by_id(task_id))

    def search_tasks_by_title(self, term: str) -> list[Task]:
        """Case-insensitive substring search on task titles."""
        return self._call("search tasks by title", lambda: self._store.search_by_title(term))

    def get_task_by_id(self, task_id: str) -> Task | None:
        return self._call("get task by id", lambda: self._store.find_by_id(task_id))

    def reset_tasks(self) -> int:
        """
        Delete every task.

        Returns:
            Number of tasks deleted
        """
        return self._call("reset tasks", self._store.delete_all)

    def check_connection(self) -> None:
        """Raise TaskOperationFailed if the task table can't be reached."""
        self._call("check connection", self._store.ping)
