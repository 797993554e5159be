# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Task Manager API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.dependencies import get_supabase_client, get_task_service, get_task_store
from app.exceptions import (
    TaskManagerException,
    task_manager_exception_handler,
    validation_exception_handler,
)
from app.routers import health, tasks

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Log configuration, verify the tasks table is reachable
    - Shutdown: Log only; the Supabase client holds no resources to release
    """
    # Startup
    logger.info(f"Starting Task Manager API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origin: {settings.CORS_ORIGIN}")
    logger.info(f"Storing tasks in Supabase table '{settings.TASKS_TABLE}' at {settings.SUPABASE_URL}")

    if settings.STARTUP_CONNECTION_CHECK:
        service = get_task_service(get_task_store(get_supabase_client()))
        # Raises TaskOperationFailed and aborts startup if unreachable
        service.check_connection()
        logger.info("Successfully connected to Supabase")

    yield

    # Shutdown
    logger.info("Shutting down Task Manager API")


# Create FastAPI application
app = FastAPI(
    title="Task Manager API",
    description="""
## Task Tracking API

Create tasks, list them, search by title and mark them done.
Tasks are stored in Supabase; marking a task done deletes it.

### Quick Start

```bash
# 1. Create a task
curl -X POST http://localhost:8000/api/tasks \\
  -H "Content-Type: application/json" \\
  -d '{"title": "Buy milk"}'

# 2. List tasks
curl http://localhost:8000/api/tasks

# 3. Five most recent tasks
curl http://localhost:8000/api/tasks/top?n=5

# 4. Search
curl http://localhost:8000/api/tasks/search?term=milk

# 5. Mark done
curl -X DELETE http://localhost:8000/api/tasks/{id}
```
""",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Tasks",
            "description": "Create, list, search and complete tasks",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - one front-end origin may call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_methods=settings.cors_methods_list,
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(TaskManagerException)
async def handle_task_manager_exception(request: Request, exc: TaskManagerException):
    """Handle custom Task Manager exceptions."""
    return await task_manager_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle missing or malformed request parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Task endpoints
app.include_router(
    tasks.router,
    prefix="/api/tasks",
    tags=["Tasks"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Task Manager API",
        "version": health.API_VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
