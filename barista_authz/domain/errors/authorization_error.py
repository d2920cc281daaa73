"""Authorization errors.

Two very different failure kinds live here:

- AccessDenied: the denial record. A normal, expected outcome of a guard,
  returned inside a Failure and rendered or logged by the caller. It names
  the missing requirement and the user's role, never the protected content.
- ConfigurationError: a catalog or matrix references a value that does not
  exist, or the matrices break a startup rule. Raised once at startup; it
  never reaches per-request evaluation.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from barista_authz.core.enums import ErrorCode
from barista_authz.core.errors import DomainError
from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import AdminModule, Permission, UserRole
from barista_authz.domain.value_objects.role_profile import role_label


class RequirementType(str, Enum):
    """What kind of requirement a denial refers to."""

    PERMISSION = "permission"
    MODULE = "module"
    ROLE = "role"
    AUTHENTICATION = "authentication"


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessDenied(DomainError):
    """Denial record produced by a guard.

    Attributes:
        code: Why access was denied (PERMISSION_DENIED, MODULE_ACCESS_DENIED,
            ROLE_REQUIRED, AUTHENTICATION_REQUIRED, ACCOUNT_INACTIVE,
            EMPTY_REQUIREMENT).
        message: Non-revealing message naming requirement and role.
        required: Requirement values (permissions, a module or a role).
        requirement_type: Kind of the values in ``required``.
        user_role: Role of the denied user, None when unauthenticated.
        require_all: For multi-permission denials, whether all were needed.
    """

    required: tuple[str, ...]
    requirement_type: RequirementType
    user_role: UserRole | None = None
    require_all: bool = True

    @property
    def required_display(self) -> str:
        """Requirements joined for display."""
        return ", ".join(self.required)

    @property
    def user_role_label(self) -> str:
        """Label of the denied user's role ("anonymous" when absent)."""
        return role_label(self.user_role)

    @classmethod
    def for_permissions(
        cls,
        user: AuthenticatedUser | None,
        permissions: Sequence[Permission],
        *,
        require_all: bool = True,
    ) -> "AccessDenied":
        """Build the denial for a failed permission check.

        Args:
            user: User that was checked (None when unauthenticated).
            permissions: Permissions that were required.
            require_all: Whether every permission was needed or just one.

        Returns:
            AccessDenied: Denial naming the permissions and the user's role.
        """
        required = tuple(permission.value for permission in permissions)
        if len(required) == 1:
            subject = f"permission '{required[0]}' required"
        elif not required:
            subject = "no permission requirement was specified"
        else:
            quantifier = "all of" if require_all else "one of"
            subject = f"{quantifier} permissions [{', '.join(required)}] required"
        return cls(
            code=_denial_code(user, ErrorCode.PERMISSION_DENIED, empty=not required),
            message=_denial_message(user, subject),
            required=required,
            requirement_type=RequirementType.PERMISSION,
            user_role=user.role if user is not None else None,
            require_all=require_all,
        )

    @classmethod
    def for_module(
        cls,
        user: AuthenticatedUser | None,
        module: AdminModule,
    ) -> "AccessDenied":
        """Build the denial for a failed module check.

        Args:
            user: User that was checked (None when unauthenticated).
            module: Module that was required.

        Returns:
            AccessDenied: Denial naming the module and the user's role.
        """
        return cls(
            code=_denial_code(user, ErrorCode.MODULE_ACCESS_DENIED),
            message=_denial_message(user, f"access to module '{module.value}' required"),
            required=(module.value,),
            requirement_type=RequirementType.MODULE,
            user_role=user.role if user is not None else None,
        )

    @classmethod
    def for_authentication(cls, user: AuthenticatedUser | None) -> "AccessDenied":
        """Build the denial for a missing or inactive account.

        Used where a request needs a signed-in, active user before any
        permission is considered.
        """
        return cls(
            code=_denial_code(user, ErrorCode.AUTHENTICATION_REQUIRED),
            message=_denial_message(user, "authentication required"),
            required=(),
            requirement_type=RequirementType.AUTHENTICATION,
            user_role=user.role if user is not None else None,
        )

    @classmethod
    def for_role(
        cls,
        user: AuthenticatedUser | None,
        roles: Sequence[UserRole],
    ) -> "AccessDenied":
        """Build the denial for a failed role gate.

        Args:
            user: User that was checked (None when unauthenticated).
            roles: Roles accepted by the gate.

        Returns:
            AccessDenied: Denial naming the accepted roles and the user's role.
        """
        required = tuple(role.value for role in roles)
        return cls(
            code=_denial_code(user, ErrorCode.ROLE_REQUIRED),
            message=_denial_message(user, f"role [{', '.join(required)}] required"),
            required=required,
            requirement_type=RequirementType.ROLE,
            user_role=user.role if user is not None else None,
            require_all=False,
        )


def _denial_code(
    user: AuthenticatedUser | None, default: ErrorCode, *, empty: bool = False
) -> ErrorCode:
    if user is None:
        return ErrorCode.AUTHENTICATION_REQUIRED
    if not user.is_active:
        return ErrorCode.ACCOUNT_INACTIVE
    if empty:
        return ErrorCode.EMPTY_REQUIREMENT
    return default


def _denial_message(user: AuthenticatedUser | None, subject: str) -> str:
    label = role_label(user.role if user is not None else None)
    if user is not None and not user.is_active:
        return f"Access denied: account is inactive; {subject} (current role: {label})"
    return f"Access denied: {subject} (current role: {label})"


class ConfigurationError(Exception):
    """Authorization catalog or matrix is structurally invalid.

    Raised at startup validation only. Carries every problem found so a
    single failed boot reports them all.

    Attributes:
        problems: One human-readable line per problem.
    """

    def __init__(self, problems: Sequence[str]) -> None:
        self.problems = list(problems)
        summary = "; ".join(self.problems) or "invalid authorization configuration"
        super().__init__(f"Invalid authorization configuration: {summary}")
