"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Every test starts with no installed authorization matrix
2. Users for each role are available as fixtures
3. Async tests are marked automatically
"""

import asyncio

import pytest

from barista_authz.core.container import reset_authorization
from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import UserRole


@pytest.fixture(autouse=True)
def clean_authorization():
    """Forget any matrix installed by a previous test."""
    reset_authorization()
    yield
    reset_authorization()


# Test helper functions for domain entities


def make_user(
    role: UserRole,
    *,
    user_id: int = 1,
    is_active: bool = True,
    email: str | None = None,
) -> AuthenticatedUser:
    """Helper to create an AuthenticatedUser for testing.

    Args:
        role: Role of the user.
        user_id: Identifier (default: 1).
        is_active: Account state (default: active).
        email: Optional email.

    Returns:
        AuthenticatedUser instance for testing.
    """
    return AuthenticatedUser(
        id=user_id,
        role=role,
        is_active=is_active,
        email=email or f"{role.value}@barista.test",
    )


@pytest.fixture
def director() -> AuthenticatedUser:
    """Active director."""
    return make_user(UserRole.DIRECTOR, user_id=1)


@pytest.fixture
def manager() -> AuthenticatedUser:
    """Active manager."""
    return make_user(UserRole.MANAGER, user_id=2)


@pytest.fixture
def employee() -> AuthenticatedUser:
    """Active employee."""
    return make_user(UserRole.EMPLOYEE, user_id=3)


@pytest.fixture
def inactive_director() -> AuthenticatedUser:
    """Director whose account has been disabled."""
    return make_user(UserRole.DIRECTOR, user_id=4, is_active=False)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: API tests against the FastAPI app")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
