# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the task logic below the HTTP layer:
# - models/: Pydantic schemas for tasks
# - services/task_store.py: Supabase task table access
# - services/task_service.py: Task operations with one error boundary
#
# Routing and request parsing live in app/, not here.
# =============================================================================
