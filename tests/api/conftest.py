"""
Router test fixtures.

Routers are exercised through the real application with services and the
request identity replaced via dependency_overrides; no database is touched.
"""

import uuid
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from mentorhub.api.deps import (
    get_chat_service,
    get_matching_service,
    get_request_context,
    get_session_service,
    get_user_service,
)
from mentorhub.api.main import create_app
from mentorhub.core.request_context import RequestContext
from mentorhub.core.roles import UserRole


@pytest.fixture
def app():
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def mock_user_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_session_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_matching_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_chat_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture(autouse=True)
def override_services(
    app, mock_user_service, mock_session_service, mock_matching_service, mock_chat_service
):
    app.dependency_overrides[get_user_service] = lambda: mock_user_service
    app.dependency_overrides[get_session_service] = lambda: mock_session_service
    app.dependency_overrides[get_matching_service] = lambda: mock_matching_service
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    app.dependency_overrides[get_request_context] = RequestContext.anonymous


@pytest.fixture
def login_as(app):
    """
    Set the identity every request resolves to.

    Usage:
        context = login_as(UserRole.STUDENT)
        login_as(None)  # anonymous
    """

    def _login_as(role: UserRole | None) -> RequestContext:
        if role is None:
            context = RequestContext.anonymous()
        else:
            context = RequestContext(session_id=uuid.uuid4(), user_id=uuid.uuid4(), role=role)
        app.dependency_overrides[get_request_context] = lambda: context
        return context

    return _login_as


@pytest.fixture
def user_record():
    """Factory for attribute bags shaped like UserModel."""

    def _user_record(username: str, role: UserRole, courses: list[str]) -> SimpleNamespace:
        return SimpleNamespace(
            id=uuid.uuid4(),
            username=username,
            email=f"{username}@example.com",
            role=role,
            courses=courses,
            contact=[f"{username}@example.com"],
        )

    return _user_record
