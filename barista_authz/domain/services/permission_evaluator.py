"""Permission evaluation (matrix membership).

Pure functions answering "may this user do X / enter module Y". They read the
user's role, look it up in an AuthorizationMatrix and return a bool. No I/O,
no logging, no mutation; safe to call from any number of concurrent request
handlers.

Fail-closed rules:
    - no user, or an inactive user: False
    - an empty requirement list: False for both any/all checks
    - a role with no matrix entry: treated as holding nothing

The user's explicit ``permissions`` list is not consulted. Matrix membership
is the single source of truth for permission and module decisions.

Usage:
    from barista_authz.domain.services.permission_evaluator import has_permission

    if has_permission(user, Permission.MENU_EDIT):
        ...
"""

from collections.abc import Sequence

from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import AdminModule, Permission
from barista_authz.domain.policies import DEFAULT_MATRIX, AuthorizationMatrix


def _is_evaluable(user: AuthenticatedUser | None) -> bool:
    return user is not None and user.is_active


def has_permission(
    user: AuthenticatedUser | None,
    permission: Permission,
    *,
    matrix: AuthorizationMatrix = DEFAULT_MATRIX,
) -> bool:
    """Check a single permission.

    Args:
        user: User to check (None when unauthenticated).
        permission: Required permission.
        matrix: Role bindings to consult.

    Returns:
        bool: True iff the user is active and their role holds the permission.
    """
    if not _is_evaluable(user):
        return False
    return permission in matrix.permissions_of(user.role)


def has_any_permission(
    user: AuthenticatedUser | None,
    permissions: Sequence[Permission],
    *,
    matrix: AuthorizationMatrix = DEFAULT_MATRIX,
) -> bool:
    """Check that at least one permission is held.

    Args:
        user: User to check (None when unauthenticated).
        permissions: Candidate permissions. An empty list denies.
        matrix: Role bindings to consult.

    Returns:
        bool: True iff the list is non-empty and one element is held.
    """
    if not _is_evaluable(user) or not permissions:
        return False
    return any(has_permission(user, p, matrix=matrix) for p in permissions)


def has_all_permissions(
    user: AuthenticatedUser | None,
    permissions: Sequence[Permission],
    *,
    matrix: AuthorizationMatrix = DEFAULT_MATRIX,
) -> bool:
    """Check that every permission is held.

    An empty list denies: an empty requirement set is never read as
    "nothing required".

    Args:
        user: User to check (None when unauthenticated).
        permissions: Required permissions.
        matrix: Role bindings to consult.

    Returns:
        bool: True iff the list is non-empty and every element is held.
    """
    if not _is_evaluable(user) or not permissions:
        return False
    return all(has_permission(user, p, matrix=matrix) for p in permissions)


def can_access_module(
    user: AuthenticatedUser | None,
    module: AdminModule,
    *,
    matrix: AuthorizationMatrix = DEFAULT_MATRIX,
) -> bool:
    """Check module access.

    Args:
        user: User to check (None when unauthenticated).
        module: Module to enter.
        matrix: Role bindings to consult.

    Returns:
        bool: True iff the user is active and their role reaches the module.
    """
    if not _is_evaluable(user):
        return False
    return module in matrix.modules_of(user.role)


def effective_permissions(
    user: AuthenticatedUser | None,
    *,
    matrix: AuthorizationMatrix = DEFAULT_MATRIX,
) -> list[Permission]:
    """Permissions the user currently holds, in catalog order."""
    if not _is_evaluable(user):
        return []
    granted = matrix.permissions_of(user.role)
    return [permission for permission in Permission if permission in granted]


def accessible_modules(
    user: AuthenticatedUser | None,
    *,
    matrix: AuthorizationMatrix = DEFAULT_MATRIX,
) -> list[AdminModule]:
    """Modules the user may enter, in navigation order."""
    if not _is_evaluable(user):
        return []
    reachable = matrix.modules_of(user.role)
    return [module for module in AdminModule if module in reachable]


class PermissionEvaluator:
    """Evaluation functions bound to one matrix.

    Implements AuthorizationProtocol. The container builds one per process
    around the validated matrix; tests can build one around any matrix.

    Attributes:
        matrix: Role bindings consulted by every check.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: AuthorizationMatrix = DEFAULT_MATRIX) -> None:
        """Initialize evaluator.

        Args:
            matrix: Role bindings to consult.
        """
        self._matrix = matrix

    @property
    def matrix(self) -> AuthorizationMatrix:
        """Role bindings consulted by every check."""
        return self._matrix

    def has_permission(
        self, user: AuthenticatedUser | None, permission: Permission
    ) -> bool:
        return has_permission(user, permission, matrix=self._matrix)

    def has_any_permission(
        self, user: AuthenticatedUser | None, permissions: Sequence[Permission]
    ) -> bool:
        return has_any_permission(user, permissions, matrix=self._matrix)

    def has_all_permissions(
        self, user: AuthenticatedUser | None, permissions: Sequence[Permission]
    ) -> bool:
        return has_all_permissions(user, permissions, matrix=self._matrix)

    def can_access_module(
        self, user: AuthenticatedUser | None, module: AdminModule
    ) -> bool:
        return can_access_module(user, module, matrix=self._matrix)

    def effective_permissions(self, user: AuthenticatedUser | None) -> list[Permission]:
        return effective_permissions(user, matrix=self._matrix)

    def accessible_modules(self, user: AuthenticatedUser | None) -> list[AdminModule]:
        return accessible_modules(user, matrix=self._matrix)
