# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Wires the app to an in-memory fake Supabase client
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("STARTUP_CONNECTION_CHECK", "false")

import pytest
from fastapi.testclient import TestClient

from core.services.task_service import TaskService
from core.services.task_store import TaskStore
from tests.fakes import FakeSupabaseClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_supabase():
    """Empty in-memory Supabase stand-in."""
    return FakeSupabaseClient()


@pytest.fixture
def store(fake_supabase):
    """TaskStore backed by the fake client."""
    return TaskStore(fake_supabase)


@pytest.fixture
def service(store):
    """TaskService over the fake-backed store."""
    return TaskService(store)


@pytest.fixture
def api_client(fake_supabase):
    """
    TestClient for the FastAPI app with the Supabase client overridden.

    Only the client is swapped, so requests run through the real
    TaskStore and TaskService.
    """
    from app.dependencies import get_supabase_client
    from app.main import app

    app.dependency_overrides[get_supabase_client] = lambda: fake_supabase
    yield TestClient(app)
    app.dependency_overrides.clear()
