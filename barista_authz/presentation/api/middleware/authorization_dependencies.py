"""Authorization dependencies.

FastAPI dependencies that gate a route on a permission, a module or a role.
They are the request-handler counterpart of AccessGuard and share its
decisions: every check goes through the same guard and evaluator.

Architecture:
    - Authentication (upstream): attaches the user to ``request.state.user``
    - Authorization (this file): decides whether that user may proceed

On allow a dependency returns the AuthenticatedUser, so a route can use it
in place of CurrentUser. On deny it raises AccessDeniedError, rendered as a
403 JSON body naming the missing requirement and the user's role.

Usage:
    # Permission-protected route
    @router.put("/menu/{item_id}")
    async def update_menu_item(
        user: Annotated[AuthenticatedUser, Depends(require_permission(Permission.MENU_EDIT))],
    ):
        ...

    # Module gate plus module-local permission
    @router.get("/reports/advanced")
    async def advanced_report(
        user: Annotated[
            AuthenticatedUser,
            Depends(require_module_permissions(
                AdminModule.REPORTS, Permission.REPORTS_ADVANCED,
            )),
        ],
    ):
        ...

    # Role gate (explicitly the hierarchy strategy)
    @router.post("/maintenance/restart")
    async def restart(
        user: Annotated[
            AuthenticatedUser,
            Depends(require_role(UserRole.MANAGER, hierarchy=True)),
        ],
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated, TypeAlias

from fastapi import Depends

from barista_authz.application.services.access_guard import AccessGuard
from barista_authz.core.container import get_access_guard
from barista_authz.core.result import Failure, Result, Success
from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import AdminModule, Permission, UserRole
from barista_authz.domain.errors import AccessDenied
from barista_authz.presentation.api.middleware.access_denied_error import (
    AccessDeniedError,
)
from barista_authz.presentation.api.middleware.auth_dependencies import OptionalUser

UserDependency: TypeAlias = Callable[..., Awaitable[AuthenticatedUser]]


def _unwrap(result: Result[AuthenticatedUser, AccessDenied]) -> AuthenticatedUser:
    match result:
        case Success(value=user):
            return user
        case Failure(error=denial):
            raise AccessDeniedError(denial)


def require_permission(permission: Permission) -> UserDependency:
    """Create a dependency that requires a specific permission.

    Args:
        permission: Required permission.

    Returns:
        Dependency function returning the user when the permission is held.

    Raises:
        AccessDeniedError 403: If the user lacks the permission.
    """

    async def permission_checker(
        current_user: OptionalUser,
        guard: Annotated[AccessGuard, Depends(get_access_guard)],
    ) -> AuthenticatedUser:
        return _unwrap(guard.check_permission(current_user, permission))

    return permission_checker


def require_any_permission(*permissions: Permission) -> UserDependency:
    """Create a dependency that requires any of the specified permissions.

    User must have at least one of the specified permissions. Called with no
    permissions, the dependency denies every request.

    Args:
        *permissions: Permissions where the user needs at least one.

    Returns:
        Dependency function returning the user when one permission is held.

    Usage:
        @router.get("/orders")
        async def list_orders(
            user: Annotated[AuthenticatedUser, Depends(require_any_permission(
                Permission.ORDERS_VIEW,
                Permission.DELIVERY_VIEW,
            ))],
        ):
            ...

    Raises:
        AccessDeniedError 403: If the user has none of the permissions.
    """

    async def permission_checker(
        current_user: OptionalUser,
        guard: Annotated[AccessGuard, Depends(get_access_guard)],
    ) -> AuthenticatedUser:
        return _unwrap(
            guard.check_permissions(current_user, permissions, require_all=False)
        )

    return permission_checker


def require_all_permissions(*permissions: Permission) -> UserDependency:
    """Create a dependency that requires all specified permissions.

    User must have ALL of the specified permissions. Called with no
    permissions, the dependency denies every request.

    Args:
        *permissions: Permissions the user needs.

    Returns:
        Dependency function returning the user when every permission is held.

    Raises:
        AccessDeniedError 403: If the user is missing any permission.
    """

    async def permission_checker(
        current_user: OptionalUser,
        guard: Annotated[AccessGuard, Depends(get_access_guard)],
    ) -> AuthenticatedUser:
        return _unwrap(
            guard.check_permissions(current_user, permissions, require_all=True)
        )

    return permission_checker


def require_module(module: AdminModule) -> UserDependency:
    """Create a dependency that requires access to a module.

    Args:
        module: Module the route belongs to.

    Returns:
        Dependency function returning the user when the module is reachable.

    Raises:
        AccessDeniedError 403: If the user's role cannot enter the module.
    """

    async def module_checker(
        current_user: OptionalUser,
        guard: Annotated[AccessGuard, Depends(get_access_guard)],
    ) -> AuthenticatedUser:
        return _unwrap(guard.check_module(current_user, module))

    return module_checker


def require_module_permissions(
    module: AdminModule,
    *permissions: Permission,
    require_all: bool = True,
) -> UserDependency:
    """Create a dependency that requires a module, then permissions inside it.

    The module gate is checked first. Permissions are only evaluated once the
    module is granted; with no permissions the module gate alone decides.

    Args:
        module: Module the route belongs to.
        *permissions: Permissions required inside the module.
        require_all: True for all-of (default), False for any-of.

    Returns:
        Dependency function returning the user when every gate passes.

    Raises:
        AccessDeniedError 403: For the first gate that fails.
    """

    async def composite_checker(
        current_user: OptionalUser,
        guard: Annotated[AccessGuard, Depends(get_access_guard)],
    ) -> AuthenticatedUser:
        return _unwrap(
            guard.check_module_permissions(
                current_user, module, permissions, require_all=require_all
            )
        )

    return composite_checker


def require_role(role: UserRole, *, hierarchy: bool = False) -> UserDependency:
    """Create a dependency that requires a role.

    This is the role-hierarchy strategy, kept apart from permission checks:
    use it for "at least a manager" style gates, never in place of a
    permission or module requirement.

    Args:
        role: Required role.
        hierarchy: When True, any role ranked at or above ``role`` passes.
            When False, only ``role`` itself passes.

    Returns:
        Dependency function returning the user when the role gate passes.

    Raises:
        AccessDeniedError 403: If the user's role does not satisfy the gate.
    """

    async def role_checker(
        current_user: OptionalUser,
        guard: Annotated[AccessGuard, Depends(get_access_guard)],
    ) -> AuthenticatedUser:
        return _unwrap(guard.check_role(current_user, role, hierarchy=hierarchy))

    return role_checker
