# =============================================================================
# core/services/task_store.py - Task Table Access
# =============================================================================
# The only module that talks to the task table in Supabase.
# Maps table rows to Task models and turns every client fault into a
# StorageError with the original exception chained.
#
# Expected table layout:
#   create table tasks (
#       id         text primary key default gen_random_uuid()::text,
#       title      text,
#       created_at timestamptz not null default now()
#   );
#
# Every method is one synchronous round trip, except search_by_title
# (fetch all, then filter locally) and delete_all (fetch all, then delete
# row by row).
# =============================================================================

import logging
from typing import Any

from supabase import Client

from core.models.task import Task
from lib.supabase_client import StorageError

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "tasks"

# Columns returned to callers; created_at stays in the table
TASK_COLUMNS = "id, title"


class TaskStore:
    """
    Store adapter for the task table.

    Holds an injected Supabase client and the table name, nothing else.

    Example:
        store = TaskStore(client)
        task = store.create("Buy milk")
        store.delete_by_id(task.id)  # True
        store.delete_by_id(task.id)  # False
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        self._client = client
        self._table = table

    @property
    def table(self) -> str:
        return self._table

    def _storage_error(self, operation: str, error: Exception, **details: Any) -> StorageError:
        logger.error(f"Task store '{operation}' failed on table {self._table}: {error}")
        return StorageError(
            message=f"Failed to {operation} tasks: {error}",
            code=f"{operation.upper()}_FAILED",
            suggestion="Check Supabase connectivity and that the tasks table exists",
            details={"table": self._table, **details},
        )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, title: str) -> Task:
        """
        Insert a new task.

        The store assigns the id and the created_at timestamp.

        Args:
            title: Title of the task

        Returns:
            The created Task with its id populated

        Raises:
            StorageError: If the insert fails or returns no row
        """
        try:
            response = (
                self._client.table(self._table)
                .insert({"title": title})
                .execute()
            )
            if not response.data:
                raise ValueError("Insert returned no data")
            task = Task.from_db_row(response.data[0])
        except Exception as e:
            raise self._storage_error("create", e, title=title) from e

        logger.info(f"Created task: {task.id}")
        return task

    def delete_by_id(self, task_id: str) -> bool:
        """
        Delete a task if it exists.

        Marking a task done removes it; there is no status flag to recover.

        Returns:
            True if the task existed and was deleted, False if it was absent

        Raises:
            StorageError: If the lookup or delete fails
        """
        if self.find_by_id(task_id) is None:
            return False

        try:
            (
                self._client.table(self._table)
                .delete()
                .eq("id", task_id)
                .execute()
            )
        except Exception as e:
            raise self._storage_error("delete", e, task_id=task_id) from e

        logger.info(f"Deleted task: {task_id}")
        return True

    def delete_all(self) -> int:
        """
        Delete every task, one row at a time.

        Not atomic: a failure part-way leaves the rows deleted so far gone.

        Returns:
            Number of rows deleted

        Raises:
            StorageError: If listing or any single delete fails
        """
        tasks = self.get_all()
        deleted = 0

        for task in tasks:
            try:
                (
                    self._client.table(self._table)
                    .delete()
                    .eq("id", task.id)
                    .execute()
                )
            except Exception as e:
                raise self._storage_error(
                    "reset", e, task_id=task.id, deleted=deleted
                ) from e
            deleted += 1

        logger.info(f"Deleted all tasks ({deleted} rows) from {self._table}")
        return deleted

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_all(self) -> list[Task]:
        """Return every task, in whatever order the store returns them."""
        try:
            response = (
                self._client.table(self._table)
                .select(TASK_COLUMNS)
                .execute()
            )
            tasks = [Task.from_db_row(row) for row in response.data or []]
        except Exception as e:
            raise self._storage_error("list", e) from e

        logger.debug(f"Fetched {len(tasks)} tasks")
        return tasks

    def find_by_id(self, task_id: str) -> Task | None:
        """
        Look up one task.

        Returns:
            The Task, or None if no row has this id
        """
        try:
            response = (
                self._client.table(self._table)
                .select(TASK_COLUMNS)
                .eq("id", task_id)
                .limit(1)
                .execute()
            )
            rows = response.data or []
            return Task.from_db_row(rows[0]) if rows else None
        except Exception as e:
            raise self._storage_error("fetch", e, task_id=task_id) from e

    def search_by_title(self, term: str) -> list[Task]:
        """
        Case-insensitive substring search on titles.

        PostgREST filters are not used here; the full table is fetched and
        filtered locally. An empty term matches every task with a title.
        Tasks with a null title never match.
        """
        needle = term.lower()
        matches = [
            task for task in self.get_all()
            if task.title is not None and needle in task.title.lower()
        ]

        logger.debug(f"Search for '{term}' matched {len(matches)} tasks")
        return matches

    def top_n(self, n: int) -> list[Task]:
        """
        Return the n most recently created tasks, newest first.

        n <= 0 returns an empty list without querying the store.
        """
        if n <= 0:
            return []

        try:
            response = (
                self._client.table(self._table)
                .select(TASK_COLUMNS)
                .order("created_at", desc=True)
                .limit(n)
                .execute()
            )
            tasks = [Task.from_db_row(row) for row in response.data or []]
        except Exception as e:
            raise self._storage_error("top", e, n=n) from e

        logger.debug(f"Fetched top {len(tasks)} of {n} requested tasks")
        return tasks

    def ping(self) -> None:
        """
        Check that the task table is reachable.

        Raises:
            StorageError: If the probe query fails
        """
        try:
            self._client.table(self._table).select("id").limit(1).execute()
        except Exception as e:
            raise self._storage_error("ping", e) from e
