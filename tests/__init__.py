# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Task Manager API:
# - test_models.py: Pydantic task model validation
# - test_task_store.py: TaskStore against an in-memory Supabase fake
# - test_task_service.py: TaskService delegation and error wrapping
# - test_tasks_api.py: HTTP endpoints end to end
#
# Run tests with: pytest
# =============================================================================
