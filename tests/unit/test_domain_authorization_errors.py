"""Unit tests for authorization errors and role profiles.

Tests cover:
- AccessDenied construction (codes, messages, requirement values)
- Role labels used in denial messages
- ConfigurationError aggregation

Reference:
    - barista_authz/domain/errors/authorization_error.py
    - barista_authz/domain/value_objects/role_profile.py
"""

import pytest

from barista_authz.core.enums import ErrorCode
from barista_authz.core.errors import DomainError
from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import AdminModule, Permission, UserRole
from barista_authz.domain.errors import AccessDenied, ConfigurationError, RequirementType
from barista_authz.domain.value_objects import ROLE_PROFILES, profile_for
from barista_authz.domain.value_objects.role_profile import role_label


@pytest.mark.unit
class TestAccessDeniedForPermissions:
    """Tests for AccessDenied.for_permissions."""

    def test_single_permission(self, employee: AuthenticatedUser) -> None:
        """Test denial names the permission and the role label."""
        denial = AccessDenied.for_permissions(employee, [Permission.MENU_EDIT])

        assert isinstance(denial, DomainError)
        assert denial.code == ErrorCode.PERMISSION_DENIED
        assert denial.required == ("menu.edit",)
        assert denial.requirement_type is RequirementType.PERMISSION
        assert denial.user_role is UserRole.EMPLOYEE
        assert denial.message == (
            "Access denied: permission 'menu.edit' required (current role: Employee)"
        )

    def test_several_permissions_any_of(self, employee: AuthenticatedUser) -> None:
        """Test any-of wording."""
        denial = AccessDenied.for_permissions(
            employee,
            [Permission.MENU_EDIT, Permission.MENU_DELETE],
            require_all=False,
        )

        assert denial.require_all is False
        assert "one of permissions [menu.edit, menu.delete]" in denial.message
        assert denial.required_display == "menu.edit, menu.delete"

    def test_several_permissions_all_of(self, employee: AuthenticatedUser) -> None:
        """Test all-of wording."""
        denial = AccessDenied.for_permissions(
            employee, [Permission.MENU_VIEW, Permission.MENU_EDIT]
        )

        assert "all of permissions [menu.view, menu.edit]" in denial.message

    def test_empty_requirement(self, manager: AuthenticatedUser) -> None:
        """Test an empty list has its own code."""
        denial = AccessDenied.for_permissions(manager, [], require_all=False)

        assert denial.code == ErrorCode.EMPTY_REQUIREMENT
        assert denial.required == ()

    def test_anonymous_user(self) -> None:
        """Test unauthenticated denial carries no role."""
        denial = AccessDenied.for_permissions(None, [Permission.MENU_VIEW])

        assert denial.code == ErrorCode.AUTHENTICATION_REQUIRED
        assert denial.user_role is None
        assert denial.user_role_label == "anonymous"
        assert "(current role: anonymous)" in denial.message

    def test_inactive_user(self, inactive_director: AuthenticatedUser) -> None:
        """Test inactive accounts are called out."""
        denial = AccessDenied.for_permissions(inactive_director, [Permission.MENU_VIEW])

        assert denial.code == ErrorCode.ACCOUNT_INACTIVE
        assert "account is inactive" in denial.message


@pytest.mark.unit
class TestAccessDeniedOtherRequirements:
    """Tests for module, role and authentication denials."""

    def test_module(self) -> None:
        """Test module denial with no user."""
        denial = AccessDenied.for_module(None, AdminModule.SETTINGS)

        assert denial.required == ("settings",)
        assert denial.requirement_type is RequirementType.MODULE
        assert denial.user_role is None
        assert "access to module 'settings' required" in denial.message

    def test_module_code(self, manager: AuthenticatedUser) -> None:
        """Test module denial code for an active user."""
        denial = AccessDenied.for_module(manager, AdminModule.PERMISSIONS)

        assert denial.code == ErrorCode.MODULE_ACCESS_DENIED
        assert denial.user_role_label == "Manager"

    def test_role(self, employee: AuthenticatedUser) -> None:
        """Test role gate denial lists accepted roles."""
        denial = AccessDenied.for_role(employee, [UserRole.DIRECTOR, UserRole.MANAGER])

        assert denial.code == ErrorCode.ROLE_REQUIRED
        assert denial.required == ("directeur", "gerant")
        assert denial.requirement_type is RequirementType.ROLE

    def test_authentication(self) -> None:
        """Test authentication denial."""
        denial = AccessDenied.for_authentication(None)

        assert denial.code == ErrorCode.AUTHENTICATION_REQUIRED
        assert denial.requirement_type is RequirementType.AUTHENTICATION
        assert denial.required == ()


@pytest.mark.unit
class TestRoleProfiles:
    """Tests for role display profiles."""

    def test_every_role_has_profile(self) -> None:
        """Test profiles are total over roles."""
        assert set(ROLE_PROFILES) == set(UserRole)

    def test_landing_routes(self) -> None:
        """Test console entry route per role."""
        assert profile_for(UserRole.DIRECTOR).landing_route == "/admin"
        assert profile_for(UserRole.MANAGER).landing_route == "/admin"
        assert profile_for(UserRole.EMPLOYEE).landing_route == "/employe"

    def test_labels(self) -> None:
        """Test labels and the anonymous fallback."""
        assert role_label(UserRole.DIRECTOR) == "Director"
        assert role_label(None) == "anonymous"
        assert profile_for(None) is None


@pytest.mark.unit
class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_collects_problems(self) -> None:
        """Test every problem is kept and summarised."""
        error = ConfigurationError(["a is wrong", "b is wrong"])

        assert error.problems == ["a is wrong", "b is wrong"]
        assert str(error) == "Invalid authorization configuration: a is wrong; b is wrong"
