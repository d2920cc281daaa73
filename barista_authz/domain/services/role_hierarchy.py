"""Ordinal role hierarchy (alternative strategy).

A separate, explicitly named strategy: a role satisfies a role gate when its
rank is at least the gate's rank. It answers "is this user at least a
manager?" and nothing else.

Permission and module decisions never use it; they use matrix membership
(see permission_evaluator.py). The two strategies are not interchangeable.
Startup validation uses the same ranks to check that the matrices already
nest (every higher role holds everything a lower role holds), so the
hierarchy never has to patch an incomplete matrix at runtime.
"""

from collections.abc import Iterable
from types import MappingProxyType

from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import UserRole

# Higher number = more privileged.
ROLE_RANK: MappingProxyType[UserRole, int] = MappingProxyType(
    {
        UserRole.EMPLOYEE: 1,
        UserRole.MANAGER: 2,
        UserRole.DIRECTOR: 3,
    }
)


def rank_of(role: UserRole | None) -> int:
    """Rank of a role; 0 for a missing or unknown role."""
    if role is None:
        return 0
    return ROLE_RANK.get(role, 0)


def roles_below(role: UserRole) -> list[UserRole]:
    """Roles strictly lower than ``role``, highest first."""
    rank = rank_of(role)
    lower = [other for other in UserRole if 0 < rank_of(other) < rank]
    return sorted(lower, key=rank_of, reverse=True)


def role_at_least(user: AuthenticatedUser | None, minimum: UserRole) -> bool:
    """Check a user's role against a minimum rank.

    Args:
        user: User to check.
        minimum: Lowest role accepted.

    Returns:
        bool: False for absent or inactive users; otherwise True when the
            user's rank is at least the minimum's.
    """
    if user is None or not user.is_active:
        return False
    return rank_of(user.role) >= rank_of(minimum)


def role_in(user: AuthenticatedUser | None, roles: Iterable[UserRole]) -> bool:
    """Exact role membership (no hierarchy).

    Args:
        user: User to check.
        roles: Accepted roles.

    Returns:
        bool: False for absent or inactive users; otherwise True when the
            user's role is one of ``roles``.
    """
    if user is None or not user.is_active:
        return False
    return user.role in set(roles)
