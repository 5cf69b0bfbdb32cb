"""
Shared pytest fixtures for authsession tests.

This module provides common fixtures including:
- Stub authentication backends (AsyncMock based)
- httpx clients backed by MockTransport for API client tests
- In-memory token stores
"""

import json
import os
import sys
from typing import Callable, Dict, List
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from authsession.config.provider import ClientConfig
from authsession.modules.api.models import AuthResponse, User
from authsession.modules.auth.manager import SessionManager
from authsession.modules.storage.store import MemoryTokenStore

BASE_URL = "https://auth.example.com/api"


# =============================================================================
# HTTP stubbing
# =============================================================================

class RecordingHandler:
    """
    MockTransport handler that answers by (method, path) and records requests.

    Usage:
        def test_login(recording_handler, http_client_factory):
            recording_handler.add("POST", "/api/auth/login", 200, {...})
            client = AuthApiClient(config, http_client_factory(recording_handler))
    """

    def __init__(self):
        self.routes: Dict[tuple, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, status_code: int = 200, body=None, **kwargs) -> "RecordingHandler":
        def respond(request: httpx.Request) -> httpx.Response:
            if body is None:
                return httpx.Response(status_code, **kwargs)
            if isinstance(body, (str, bytes)):
                return httpx.Response(status_code, content=body, **kwargs)
            return httpx.Response(status_code, json=body, **kwargs)

        self.routes[(method, path)] = respond
        return self

    def add_error(self, method: str, path: str, exc: Exception) -> "RecordingHandler":
        def respond(request: httpx.Request) -> httpx.Response:
            raise exc

        self.routes[(method, path)] = respond
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found", "statusCode": 404})
        return route(request)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recording_handler():
    return RecordingHandler()


@pytest.fixture
def http_client_factory():
    """Build httpx.AsyncClient instances answered by a handler."""
    def factory(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return factory


@pytest.fixture
def client_config():
    return ClientConfig(base_url=BASE_URL, timeout=5.0)


# =============================================================================
# Session fixtures
# =============================================================================

@pytest.fixture
def sample_user():
    return User(id=1, name="A")


@pytest.fixture
def auth_response(sample_user):
    return AuthResponse(user=sample_user, token="tok1")


@pytest.fixture
def token_store():
    return MemoryTokenStore()


@pytest.fixture
def mock_backend():
    """Create a mock AuthBackend."""
    backend = MagicMock()
    backend.login = AsyncMock()
    backend.check_token = AsyncMock()
    return backend


@pytest.fixture
def session_manager(mock_backend, token_store):
    """Create a SessionManager with a mock backend and an in-memory store."""
    return SessionManager(mock_backend, token_store)
