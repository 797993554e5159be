# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The Supabase client is built once per process (lru_cache) and handed down
# explicitly: client -> TaskStore -> TaskService. Tests swap any layer with
# app.dependency_overrides.
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from supabase import Client

from app.config import settings
from core.services.task_service import TaskService
from core.services.task_store import TaskStore
from lib.supabase_client import create_supabase_client


@lru_cache
def get_supabase_client() -> Client:
    """
    Get the process-wide Supabase client.

    Created on first use, then reused for the life of the process.
    """
    return create_supabase_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)


def get_task_store(
    client: Annotated[Client, Depends(get_supabase_client)],
) -> TaskStore:
    """Get a TaskStore bound to the configured tasks table."""
    return TaskStore(client, table=settings.TASKS_TABLE)


def get_task_service(
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> TaskService:
    """Get the TaskService used by the task routes."""
    return TaskService(store)


# Type alias for dependency injection
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
