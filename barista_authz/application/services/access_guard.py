"""Access guard service.

Wraps a protected operation: the operation runs only when the user passes
the check, otherwise a denial is produced (and logged) instead. Permission
and module checks are delegated to an AuthorizationProtocol implementation;
role gates use the role hierarchy. The same decisions, and the same denial
log, back both this callable guard and the FastAPI dependencies.

Architecture:
    - Application service (composes the evaluator and the logger)
    - check_* methods return Result[AuthenticatedUser, AccessDenied]
    - guard_* methods run the operation, the fallback, or return the denial

Usage:
    guard = get_access_guard()

    # Result style
    match guard.check_permission(user, Permission.MENU_EDIT):
        case Success(value=user):
            ...
        case Failure(error=denial):
            ...

    # Wrapper style
    outcome = guard.guard_module(
        user,
        AdminModule.REPORTS,
        operation=lambda: build_report(),
        fallback=lambda denial: {"message": denial.message},
    )
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from barista_authz.core.result import Failure, Result, Success
from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import AdminModule, Permission, UserRole
from barista_authz.domain.errors import AccessDenied
from barista_authz.domain.protocols.authorization_protocol import AuthorizationProtocol
from barista_authz.domain.protocols.logger_protocol import LoggerProtocol
from barista_authz.domain.services.role_hierarchy import (
    role_at_least,
    role_in,
    roles_below,
)

T = TypeVar("T")
F = TypeVar("F")


class AccessGuard:
    """Allow-or-deny wrapper around protected operations.

    Dependencies (injected via constructor):
        - AuthorizationProtocol: Evaluation engine (matrix membership)
        - LoggerProtocol: Receives one warning per denial

    Denial log entries name the requirement and the role, never the
    protected content and never the operation's result.
    """

    def __init__(
        self,
        evaluator: AuthorizationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize guard with dependencies.

        Args:
            evaluator: Evaluation engine.
            logger: Structured logger for denials.
        """
        self._evaluator = evaluator
        self._logger = logger

    # =========================================================================
    # Checks (Result style)
    # =========================================================================

    def check_permission(
        self,
        user: AuthenticatedUser | None,
        permission: Permission,
    ) -> Result[AuthenticatedUser, AccessDenied]:
        """Require a single permission.

        Args:
            user: User to check (None when unauthenticated).
            permission: Required permission.

        Returns:
            Success(AuthenticatedUser): Permission held.
            Failure(AccessDenied): Denial naming the permission and role.
        """
        if user is not None and self._evaluator.has_permission(user, permission):
            return Success(value=user)
        return self._deny(AccessDenied.for_permissions(user, [permission]))

    def check_permissions(
        self,
        user: AuthenticatedUser | None,
        permissions: Sequence[Permission],
        *,
        require_all: bool = True,
    ) -> Result[AuthenticatedUser, AccessDenied]:
        """Require all (default) or any of several permissions.

        An empty list always denies.

        Args:
            user: User to check (None when unauthenticated).
            permissions: Required permissions.
            require_all: True for all-of, False for any-of.

        Returns:
            Success(AuthenticatedUser): Requirement met.
            Failure(AccessDenied): Denial naming the permissions and role.
        """
        if user is not None and self._permissions_held(user, permissions, require_all):
            return Success(value=user)
        return self._deny(
            AccessDenied.for_permissions(user, permissions, require_all=require_all)
        )

    def check_module(
        self,
        user: AuthenticatedUser | None,
        module: AdminModule,
    ) -> Result[AuthenticatedUser, AccessDenied]:
        """Require access to a module.

        Args:
            user: User to check (None when unauthenticated).
            module: Module to enter.

        Returns:
            Success(AuthenticatedUser): Module reachable.
            Failure(AccessDenied): Denial naming the module and role.
        """
        if user is not None and self._evaluator.can_access_module(user, module):
            return Success(value=user)
        return self._deny(AccessDenied.for_module(user, module))

    def check_module_permissions(
        self,
        user: AuthenticatedUser | None,
        module: AdminModule,
        permissions: Sequence[Permission] = (),
        *,
        require_all: bool = True,
    ) -> Result[AuthenticatedUser, AccessDenied]:
        """Require a module, then permissions inside it.

        The module gate runs first; on denial the permissions are never
        evaluated. With the module granted, an empty permission list means
        the module gate alone protects the operation.

        Args:
            user: User to check (None when unauthenticated).
            module: Module to enter.
            permissions: Permissions required once inside the module.
            require_all: True for all-of, False for any-of.

        Returns:
            Success(AuthenticatedUser): Module and permissions granted.
            Failure(AccessDenied): Denial for the first failed gate.
        """
        module_result = self.check_module(user, module)
        if isinstance(module_result, Failure) or not permissions:
            return module_result
        return self.check_permissions(user, permissions, require_all=require_all)

    def check_role(
        self,
        user: AuthenticatedUser | None,
        role: UserRole,
        *,
        hierarchy: bool = False,
    ) -> Result[AuthenticatedUser, AccessDenied]:
        """Require a role (role-hierarchy strategy).

        Kept apart from permission and module checks: the evaluator is never
        consulted, only role ranks. Use it for "at least a manager" gates.

        Args:
            user: User to check (None when unauthenticated).
            role: Required role.
            hierarchy: When True, any role ranked at or above ``role`` passes.
                When False, only ``role`` itself passes.

        Returns:
            Success(AuthenticatedUser): Role gate passed.
            Failure(AccessDenied): Denial naming the accepted roles.
        """
        if hierarchy:
            allowed = role_at_least(user, role)
            accepted = [r for r in UserRole if r not in roles_below(role)]
        else:
            allowed = role_in(user, [role])
            accepted = [role]
        if user is not None and allowed:
            return Success(value=user)
        return self._deny(AccessDenied.for_role(user, accepted))

    # =========================================================================
    # Guards (wrapper style)
    # =========================================================================

    def guard_permission(
        self,
        user: AuthenticatedUser | None,
        permission: Permission,
        operation: Callable[[], T],
        fallback: Callable[[AccessDenied], F] | None = None,
    ) -> T | F | AccessDenied:
        """Run ``operation`` if the user holds ``permission``."""
        return self._run(self.check_permission(user, permission), operation, fallback)

    def guard_permissions(
        self,
        user: AuthenticatedUser | None,
        permissions: Sequence[Permission],
        operation: Callable[[], T],
        fallback: Callable[[AccessDenied], F] | None = None,
        *,
        require_all: bool = True,
    ) -> T | F | AccessDenied:
        """Run ``operation`` if the user meets a multi-permission requirement."""
        return self._run(
            self.check_permissions(user, permissions, require_all=require_all),
            operation,
            fallback,
        )

    def guard_module(
        self,
        user: AuthenticatedUser | None,
        module: AdminModule,
        operation: Callable[[], T],
        fallback: Callable[[AccessDenied], F] | None = None,
    ) -> T | F | AccessDenied:
        """Run ``operation`` if the user may enter ``module``."""
        return self._run(self.check_module(user, module), operation, fallback)

    def guard_composite(
        self,
        user: AuthenticatedUser | None,
        module: AdminModule,
        permissions: Sequence[Permission],
        operation: Callable[[], T],
        fallback: Callable[[AccessDenied], F] | None = None,
        *,
        require_all: bool = True,
    ) -> T | F | AccessDenied:
        """Run ``operation`` behind a module gate and module-local permissions.

        Args:
            user: User to check (None when unauthenticated).
            module: Module to enter.
            permissions: Permissions required once inside the module.
            operation: Protected operation, called with no arguments.
            fallback: Called with the denial instead of ``operation``.
            require_all: True for all-of, False for any-of.

        Returns:
            The operation's value on allow; the fallback's value on deny when
            a fallback is given; otherwise the AccessDenied record.
        """
        return self._run(
            self.check_module_permissions(
                user, module, permissions, require_all=require_all
            ),
            operation,
            fallback,
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _permissions_held(
        self,
        user: AuthenticatedUser,
        permissions: Sequence[Permission],
        require_all: bool,
    ) -> bool:
        if require_all:
            return self._evaluator.has_all_permissions(user, permissions)
        return self._evaluator.has_any_permission(user, permissions)

    def _deny(self, denial: AccessDenied) -> Failure[AccessDenied]:
        self._logger.warning(
            "access_denied",
            code=denial.code.value,
            requirement_type=denial.requirement_type.value,
            required=list(denial.required),
            require_all=denial.require_all,
            user_role=denial.user_role.value if denial.user_role else None,
        )
        return Failure(error=denial)

    @staticmethod
    def _run(
        result: Result[AuthenticatedUser, AccessDenied],
        operation: Callable[[], T],
        fallback: Callable[[AccessDenied], F] | None,
    ) -> T | F | AccessDenied:
        match result:
            case Success():
                return operation()
            case Failure(error=denial):
                if fallback is not None:
                    return fallback(denial)
                return denial
