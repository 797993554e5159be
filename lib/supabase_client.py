# =============================================================================
# lib/supabase_client.py - Supabase Client Factory
# =============================================================================
# This module builds the one Supabase client the process talks to the task
# table through, and defines the error raised when the store misbehaves.
#
# The client is created once at startup (see app/dependencies.py) and passed
# explicitly to the TaskStore. Nothing here keeps a module-level handle.
#
# Usage:
#   from lib.supabase_client import create_supabase_client
#   client = create_supabase_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import Client, create_client

from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)


class StorageError(ApplicationError):
    """
    Error during a Supabase operation.

    Raised for any transport, API or row-mapping fault. The original
    exception is always chained as __cause__.
    """

    def __init__(
        self,
        message: str,
        code: str = "STORAGE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


def create_supabase_client(url: str, key: str) -> Client:
    """
    Create a Supabase client.

    Uses the service_role key, which bypasses Row Level Security (RLS).
    This is appropriate for server-side operations.

    Args:
        url: Supabase project URL
        key: Supabase service_role key

    Returns:
        Client: Supabase client instance

    Raises:
        StorageError: If client creation fails
    """
    try:
        client = create_client(url, key)
    except Exception as e:
        raise StorageError(
            message=f"Failed to create Supabase client: {e}",
            code="CLIENT_INIT_FAILED",
            suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file",
        ) from e

    logger.info(f"Supabase client initialized for {url}")
    return client
