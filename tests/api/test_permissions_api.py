"""API tests for the permissions resource.

Tests cover:
- GET /api/v1/permissions/me (effective access and navigation)
- GET /api/v1/permissions/roles (module + permission gate)
- GET /api/v1/permissions/roles/{role} (404 for unknown roles)

Reference:
    - barista_authz/presentation/api/v1/permissions.py
"""

import pytest
from fastapi.testclient import TestClient

from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import AdminModule, Permission, UserRole
from barista_authz.domain.policies import ROLE_PERMISSIONS
from barista_authz.main import app
from barista_authz.presentation.api.middleware.auth_dependencies import (
    get_current_user_optional,
)
from tests.conftest import make_user


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
# /permissions/me
# =============================================================================


@pytest.mark.api
class TestMyPermissions:
    """Test GET /api/v1/permissions/me."""

    def test_employee_access(self, client_as):
        """Test employee sees their own permissions and navigation."""
        user = AuthenticatedUser(
            id=7,
            role=UserRole.EMPLOYEE,
            first_name="Léa",
            last_name="Martin",
        )

        response = client_as(user).get("/api/v1/permissions/me")

        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == 7
        assert data["display_name"] == "Léa Martin"
        assert data["role"] == "employe"
        assert data["role_label"] == "Employee"
        assert data["landing_route"] == "/employe"
        assert "menu.view" in data["permissions"]
        assert "menu.edit" not in data["permissions"]
        assert data["modules"][0] == "dashboard"
        assert "settings" not in data["modules"]
        assert data["navigation"][0] == {
            "module": "dashboard",
            "label": "Dashboard",
            "route": "/employe/dashboard",
        }

    def test_director_sees_everything(self, client_as):
        """Test director listing covers the full catalogs."""
        response = client_as(make_user(UserRole.DIRECTOR)).get("/api/v1/permissions/me")

        data = response.json()
        assert data["permissions"] == Permission.values()
        assert data["modules"] == AdminModule.values()
        routes = {item["module"]: item["route"] for item in data["navigation"]}
        assert routes["activity_logs"] == "/admin/activity-logs"

    def test_anonymous_gets_401(self, client_as):
        """Test the endpoint needs a signed-in user."""
        response = client_as(None).get("/api/v1/permissions/me")

        assert response.status_code == 401
        assert response.json()["success"] is False
        assert response.json()["userRole"] is None

    def test_inactive_user_gets_403(self, client_as):
        """Test disabled accounts are refused."""
        user = make_user(UserRole.MANAGER, is_active=False)

        response = client_as(user).get("/api/v1/permissions/me")

        assert response.status_code == 403
        assert response.json()["userRole"] == "gerant"


# =============================================================================
# /permissions/roles
# =============================================================================


@pytest.mark.api
class TestRoles:
    """Test role matrix endpoints."""

    def test_director_lists_roles(self, client_as):
        """Test overview lists every role, highest first."""
        response = client_as(make_user(UserRole.DIRECTOR)).get("/api/v1/permissions/roles")

        assert response.status_code == 200
        data = response.json()
        assert [r["role"] for r in data["roles"]] == ["directeur", "gerant", "employe"]
        assert data["total_permissions"] == len(Permission)
        assert data["total_modules"] == len(AdminModule)
        manager = data["roles"][1]
        assert manager["label"] == "Manager"
        assert len(manager["permissions"]) == len(ROLE_PERMISSIONS[UserRole.MANAGER])

    def test_manager_denied_at_module_gate(self, client_as):
        """Test manager cannot reach the permissions module."""
        response = client_as(make_user(UserRole.MANAGER)).get("/api/v1/permissions/roles")

        assert response.status_code == 403
        assert response.json()["requiredPermission"] == "permissions"
        assert response.json()["userRole"] == "gerant"

    def test_get_single_role(self, client_as):
        """Test one role's bindings."""
        response = client_as(make_user(UserRole.DIRECTOR)).get(
            "/api/v1/permissions/roles/employe"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "employe"
        assert data["color"] == "green"
        assert "tables.edit" in data["permissions"]

    def test_unknown_role_returns_404(self, client_as):
        """Test unknown role names are not found."""
        response = client_as(make_user(UserRole.DIRECTOR)).get(
            "/api/v1/permissions/roles/admin"
        )

        assert response.status_code == 404

    def test_unknown_role_still_gated(self, client_as):
        """Test the gate runs before the role lookup."""
        response = client_as(make_user(UserRole.EMPLOYEE)).get(
            "/api/v1/permissions/roles/admin"
        )

        assert response.status_code == 403
