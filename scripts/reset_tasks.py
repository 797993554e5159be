#!/usr/bin/env python3
# =============================================================================
# scripts/reset_tasks.py - Delete Every Task
# =============================================================================
# Empties the tasks table, one row at a time. Useful for resetting a dev or
# demo project. Not atomic: if it fails part-way, re-run it.
#
# Usage:
#   python scripts/reset_tasks.py          # Asks for confirmation
#   python scripts/reset_tasks.py --yes    # No prompt
#
# Prerequisites:
#   - SUPABASE_URL and SUPABASE_SERVICE_KEY set (.env file or environment)
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from app.config import settings
from app.dependencies import get_supabase_client, get_task_service, get_task_store
from app.exceptions import TaskOperationFailed


def main(argv: list[str] | None = None) -> int:
    """Delete all tasks. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv

    print("=" * 60)
    print("Task Manager - Reset Tasks")
    print("=" * 60)
    print(f"Project: {settings.SUPABASE_URL}")
    print(f"Table:   {settings.TASKS_TABLE}")
    print()

    if "--yes" not in argv:
        answer = input("Delete ALL tasks? This cannot be undone. [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Aborted.")
            return 1

    service = get_task_service(get_task_store(get_supabase_client()))

    try:
        deleted = service.reset_tasks()
    except TaskOperationFailed as e:
        print(f"ERROR: {e.message}: {e.cause}")
        return 2

    print(f"Deleted {deleted} task(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
