"""Authorization protocol (port) for RBAC access control.

This protocol defines the contract the guard layer depends on. The matrix
evaluator (domain/services/permission_evaluator.py) implements it; tests can
substitute spies or stubs.

Usage:
    from barista_authz.domain.protocols import AuthorizationProtocol

    authz: AuthorizationProtocol = get_authorization()
    if authz.has_permission(user, Permission.MENU_EDIT):
        ...
"""

from collections.abc import Sequence
from typing import Protocol

from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import AdminModule, Permission


class AuthorizationProtocol(Protocol):
    """Protocol for authorization evaluation.

    Error Handling:
        Every check returns bool (fail-closed design). Absent or inactive
        users, empty requirement lists and unknown roles all yield False.
        Implementations never raise for well-formed enum input.
    """

    def has_permission(
        self, user: AuthenticatedUser | None, permission: Permission
    ) -> bool:
        """Check if the user holds a permission.

        Args:
            user: User to check (None when unauthenticated).
            permission: Required permission.

        Returns:
            bool: True if allowed, False if denied.
        """
        ...

    def has_any_permission(
        self, user: AuthenticatedUser | None, permissions: Sequence[Permission]
    ) -> bool:
        """Check if the user holds at least one permission (empty list denies).

        Args:
            user: User to check.
            permissions: Candidate permissions.

        Returns:
            bool: True if allowed, False if denied.
        """
        ...

    def has_all_permissions(
        self, user: AuthenticatedUser | None, permissions: Sequence[Permission]
    ) -> bool:
        """Check if the user holds every permission (empty list denies).

        Args:
            user: User to check.
            permissions: Required permissions.

        Returns:
            bool: True if allowed, False if denied.
        """
        ...

    def can_access_module(
        self, user: AuthenticatedUser | None, module: AdminModule
    ) -> bool:
        """Check if the user may enter a module.

        Args:
            user: User to check.
            module: Module to enter.

        Returns:
            bool: True if allowed, False if denied.
        """
        ...

    def effective_permissions(self, user: AuthenticatedUser | None) -> list[Permission]:
        """List the permissions the user holds, in catalog order."""
        ...

    def accessible_modules(self, user: AuthenticatedUser | None) -> list[AdminModule]:
        """List the modules the user may enter, in navigation order."""
        ...
