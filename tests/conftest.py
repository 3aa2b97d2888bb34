"""
Pytest fixtures for campus-profiles tests
"""

import pytest
from unittest.mock import MagicMock
from typing import Dict, Any
from fastapi.testclient import TestClient

from campus_profiles.modules.auth.forms import FormRegistry
from campus_profiles.modules.auth.service import AuthService
from campus_profiles.modules.profiles.service import ProfileService


class FakeApiError(Exception):
    """Shape of the errors raised by the Supabase SDK (message + status)"""

    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


@pytest.fixture
def sample_profile_row() -> Dict[str, Any]:
    """Profile row as returned by the profiles table"""
    return {
        "id": "u1",
        "name": "Ann",
        "college": "MIT",
        "created_at": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def mock_supabase():
    """Mock Supabase client"""
    return MagicMock()


@pytest.fixture
def auth_service():
    """Mock AuthService"""
    return MagicMock(spec=AuthService)


@pytest.fixture
def profile_service():
    """Mock ProfileService"""
    return MagicMock(spec=ProfileService)


@pytest.fixture
def registry():
    return FormRegistry(max_size=10)


@pytest.fixture
def client(auth_service, profile_service, registry):
    """Test client with the services replaced by mocks"""
    from campus_profiles.main import app
    from campus_profiles.core.dependencies import get_auth_service, get_profile_service, get_form_registry
    from campus_profiles.core.rate_limit import limiter

    limiter.reset()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_form_registry] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
