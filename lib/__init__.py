# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Supabase client factory and StorageError
# - utils.py: Shared base error class
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import StorageError, create_supabase_client
from lib.utils import ApplicationError

__all__ = [
    # Supabase
    "StorageError",
    "create_supabase_client",
    # Utils
    "ApplicationError",
]
