"""API tests for authorization dependencies.

Tests cover:
- require_permission() returns 403 with the denial body
- require_any_permission() / require_all_permissions() semantics, including
  empty requirement lists
- require_module() and require_module_permissions() (module gate first)
- require_role() exact and hierarchy modes
- Allowed requests receive the user

Test Strategy:
    Test endpoints are added to the real app. The current user is injected
    by overriding get_current_user_optional, standing in for the upstream
    authentication layer.

Reference:
    - barista_authz/presentation/api/middleware/authorization_dependencies.py
"""

from typing import Annotated

import pytest
from fastapi import Depends, Request
from fastapi.testclient import TestClient

from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import AdminModule, Permission, UserRole
from barista_authz.main import app
from barista_authz.presentation.api.middleware.auth_dependencies import (
    get_current_user_optional,
)
from barista_authz.presentation.api.middleware.authorization_dependencies import (
    require_all_permissions,
    require_any_permission,
    require_module,
    require_module_permissions,
    require_permission,
    require_role,
)
from tests.conftest import make_user


# =============================================================================
# Test Endpoints Setup
# =============================================================================


def setup_test_endpoints():
    """Add test endpoints to the real app for authorization testing."""

    @app.put("/test/menu")
    async def edit_menu(
        user: Annotated[AuthenticatedUser, Depends(require_permission(Permission.MENU_EDIT))],
    ):
        return {"user_id": user.id}

    @app.get("/test/orders")
    async def list_orders(
        _: Annotated[
            AuthenticatedUser,
            Depends(require_any_permission(Permission.ORDERS_VIEW, Permission.DELIVERY_VIEW)),
        ],
    ):
        return {"orders": []}

    @app.get("/test/reports/advanced")
    async def advanced_report(
        _: Annotated[
            AuthenticatedUser,
            Depends(
                require_all_permissions(
                    Permission.DASHBOARD_VIEW, Permission.REPORTS_ADVANCED
                )
            ),
        ],
    ):
        return {"report": "advanced"}

    @app.get("/test/settings")
    async def settings_screen(
        _: Annotated[AuthenticatedUser, Depends(require_module(AdminModule.SETTINGS))],
    ):
        return {"settings": {}}

    @app.put("/test/permissions")
    async def edit_permissions(
        _: Annotated[
            AuthenticatedUser,
            Depends(
                require_module_permissions(
                    AdminModule.PERMISSIONS, Permission.PERMISSIONS_EDIT
                )
            ),
        ],
    ):
        return {"updated": True}

    @app.get("/test/supervision")
    async def supervision(
        _: Annotated[
            AuthenticatedUser, Depends(require_role(UserRole.MANAGER, hierarchy=True))
        ],
    ):
        return {"ok": True}

    @app.get("/test/managers-only")
    async def managers_only(
        _: Annotated[AuthenticatedUser, Depends(require_role(UserRole.MANAGER))],
    ):
        return {"ok": True}

    # Edge case endpoints
    @app.get("/test/empty-any")
    async def empty_any(
        _: Annotated[AuthenticatedUser, Depends(require_any_permission())],
    ):
        return {"ok": True}

    @app.get("/test/empty-all")
    async def empty_all(
        _: Annotated[AuthenticatedUser, Depends(require_all_permissions())],
    ):
        return {"ok": True}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(scope="module", autouse=True)
def setup_endpoints():
    """Setup test endpoints once for the entire module."""
    setup_test_endpoints()


@pytest.fixture
def client_as():
    """Create a TestClient that authenticates every request as ``user``."""
    clients: list[TestClient] = []

    def _client(user: AuthenticatedUser | None) -> TestClient:
        async def current_user_override() -> AuthenticatedUser | None:
            return user

        app.dependency_overrides[get_current_user_optional] = current_user_override
        client = TestClient(app, raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    yield _client

    for client in clients:
        client.__exit__(None, None, None)
    app.dependency_overrides.clear()


# =============================================================================
# require_permission Tests
# =============================================================================


@pytest.mark.api
class TestRequirePermission:
    """Test require_permission dependency."""

    def test_returns_403_with_denial_body(self, client_as):
        """Test employee cannot edit the menu."""
        client = client_as(make_user(UserRole.EMPLOYEE))

        response = client.put("/test/menu")

        assert response.status_code == 403
        assert response.json() == {
            "success": False,
            "message": "Access denied: permission 'menu.edit' required "
            "(current role: Employee)",
            "requiredPermission": "menu.edit",
            "userRole": "employe",
        }

    def test_allows_and_returns_user(self, client_as):
        """Test manager can edit the menu and the route receives the user."""
        client = client_as(make_user(UserRole.MANAGER, user_id=42))

        response = client.put("/test/menu")

        assert response.status_code == 200
        assert response.json() == {"user_id": 42}

    def test_anonymous_denied_with_null_role(self, client_as):
        """Test unauthenticated callers get a denial with no role."""
        client = client_as(None)

        response = client.put("/test/menu")

        assert response.status_code == 403
        assert response.json()["userRole"] is None

    def test_inactive_user_denied(self, client_as):
        """Test disabled accounts are denied even as director."""
        client = client_as(make_user(UserRole.DIRECTOR, is_active=False))

        response = client.put("/test/menu")

        assert response.status_code == 403
        assert "inactive" in response.json()["message"]


# =============================================================================
# require_any_permission / require_all_permissions Tests
# =============================================================================


@pytest.mark.api
class TestRequireAnyAllPermissions:
    """Test multi-permission dependencies."""

    def test_any_permission_allows(self, client_as):
        """Test one held permission is enough."""
        response = client_as(make_user(UserRole.EMPLOYEE)).get("/test/orders")

        assert response.status_code == 200

    def test_all_permissions_denied_lists_requirements(self, client_as):
        """Test missing one of several permissions returns the list."""
        response = client_as(make_user(UserRole.MANAGER)).get("/test/reports/advanced")

        assert response.status_code == 403
        assert response.json()["requiredPermission"] == [
            "dashboard.view",
            "reports.advanced",
        ]

    def test_all_permissions_allows_director(self, client_as):
        """Test director holds both permissions."""
        response = client_as(make_user(UserRole.DIRECTOR)).get("/test/reports/advanced")

        assert response.status_code == 200
        assert response.json() == {"report": "advanced"}

    @pytest.mark.parametrize("path", ["/test/empty-any", "/test/empty-all"])
    def test_empty_requirement_denies_everyone(self, client_as, path):
        """Test fail-closed on empty permission lists."""
        response = client_as(make_user(UserRole.DIRECTOR)).get(path)

        assert response.status_code == 403
        assert response.json()["requiredPermission"] == []


# =============================================================================
# Module Tests
# =============================================================================


@pytest.mark.api
class TestRequireModule:
    """Test module dependencies."""

    def test_module_denied(self, client_as):
        """Test manager cannot open settings."""
        response = client_as(make_user(UserRole.MANAGER)).get("/test/settings")

        assert response.status_code == 403
        assert response.json()["requiredPermission"] == "settings"

    def test_module_allowed(self, client_as):
        """Test director opens settings."""
        response = client_as(make_user(UserRole.DIRECTOR)).get("/test/settings")

        assert response.status_code == 200

    def test_composite_denies_at_module_gate(self, client_as):
        """Test module requirement is reported before the permission."""
        response = client_as(make_user(UserRole.MANAGER)).put("/test/permissions")

        assert response.status_code == 403
        assert response.json()["requiredPermission"] == "permissions"
        assert "module 'permissions'" in response.json()["message"]

    def test_composite_allows_director(self, client_as):
        """Test director passes both gates."""
        response = client_as(make_user(UserRole.DIRECTOR)).put("/test/permissions")

        assert response.status_code == 200


# =============================================================================
# require_role Tests
# =============================================================================


@pytest.mark.api
class TestRequireRole:
    """Test role dependency (hierarchy strategy)."""

    @pytest.mark.parametrize(
        ("role", "status_code"),
        [
            (UserRole.DIRECTOR, 200),
            (UserRole.MANAGER, 200),
            (UserRole.EMPLOYEE, 403),
        ],
    )
    def test_hierarchy_mode(self, client_as, role, status_code):
        """Test any role at or above manager passes."""
        response = client_as(make_user(role)).get("/test/supervision")

        assert response.status_code == status_code

    def test_hierarchy_denial_lists_accepted_roles(self, client_as):
        """Test denial names the roles that would pass."""
        response = client_as(make_user(UserRole.EMPLOYEE)).get("/test/supervision")

        assert response.json()["requiredPermission"] == ["directeur", "gerant"]

    def test_exact_mode_rejects_higher_role(self, client_as):
        """Test exact mode applies no hierarchy."""
        response = client_as(make_user(UserRole.DIRECTOR)).get("/test/managers-only")

        assert response.status_code == 403
        assert response.json()["requiredPermission"] == "gerant"


# =============================================================================
# Current user extraction
# =============================================================================


@pytest.mark.api
class TestCurrentUserExtraction:
    """Test get_current_user_optional reads request.state.user."""

    async def test_reads_user_from_request_state(self):
        """Test the authenticated user placed upstream is returned."""
        user = make_user(UserRole.EMPLOYEE)
        request = Request({"type": "http", "state": {"user": user}})

        assert await get_current_user_optional(request) is user

    async def test_missing_user_is_none(self):
        """Test an anonymous request yields None."""
        request = Request({"type": "http", "state": {}})

        assert await get_current_user_optional(request) is None

    async def test_foreign_object_is_ignored(self):
        """Test only AuthenticatedUser instances are accepted."""
        request = Request({"type": "http", "state": {"user": {"role": "directeur"}}})

        assert await get_current_user_optional(request) is None
