# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors tell the client HOW to fix the request, not just WHAT failed.
# Storage causes are logged, never returned to the client.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TaskManagerException(Exception):
    """
    Base exception for the Task Manager API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "TASK_MANAGER_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Task Exceptions
# =============================================================================

class TaskNotFoundError(TaskManagerException):
    """Raised when a task ID doesn't exist."""

    def __init__(self, task_id: str):
        super().__init__(
            message=f"Task not found: {task_id}",
            code="TASK_NOT_FOUND",
            status_code=404,
            suggestion="Check that the task id is correct and the task hasn't already been marked done",
            details={"task_id": task_id}
        )


class TaskOperationFailed(TaskManagerException):
    """
    Raised by TaskService when the store fails.

    Every storage fault surfaces as this one type. The original error is
    kept on `cause` (and as __cause__) for logs only; to_dict() never
    includes it.
    """

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(
            message=f"Task operation failed: {operation}",
            code="TASK_OPERATION_FAILED",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"operation": operation}
        )
        self.operation = operation
        self.cause = cause


# =============================================================================
# Exception Handlers
# =============================================================================

async def task_manager_exception_handler(
    request: Request,
    exc: TaskManagerException
) -> JSONResponse:
    """
    Convert TaskManagerException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    if isinstance(exc, TaskOperationFailed):
        logger.error(
            f"{request.method} {request.url.path} failed during "
            f"'{exc.operation}': {exc.cause!r}"
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Missing or malformed parameters (no search term, a non-numeric n,
    an empty title) are client errors and map to 400.
    """
    errors = [
        {
            "location": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "suggestion": "Check the request parameters and body against the API docs at /docs",
            "errors": errors,
        }
    )
