"""Presentation data attached to each role.

Labels and descriptions shown next to a user's name and in denial notices,
plus the console entry route each role lands on after login.
"""

from dataclasses import dataclass
from types import MappingProxyType

from barista_authz.domain.enums import UserRole

ANONYMOUS_LABEL = "anonymous"


@dataclass(frozen=True, slots=True, kw_only=True)
class RoleProfile:
    """Display profile of a role.

    Attributes:
        role: Role described.
        label: Short human-readable name.
        description: One-line summary of what the role covers.
        color: Badge colour used by the console.
        landing_route: Console route opened after login.
    """

    role: UserRole
    label: str
    description: str
    color: str
    landing_route: str


ROLE_PROFILES: MappingProxyType[UserRole, RoleProfile] = MappingProxyType(
    {
        UserRole.DIRECTOR: RoleProfile(
            role=UserRole.DIRECTOR,
            label="Director",
            description="Full access to every feature",
            color="red",
            landing_route="/admin",
        ),
        UserRole.MANAGER: RoleProfile(
            role=UserRole.MANAGER,
            label="Manager",
            description="Operational management and supervision",
            color="blue",
            landing_route="/admin",
        ),
        UserRole.EMPLOYEE: RoleProfile(
            role=UserRole.EMPLOYEE,
            label="Employee",
            description="Daily operations and customer service",
            color="green",
            landing_route="/employe",
        ),
    }
)


def profile_for(role: UserRole | None) -> RoleProfile | None:
    """Look up a role's profile; None for a missing role."""
    if role is None:
        return None
    return ROLE_PROFILES.get(role)


def role_label(role: UserRole | None) -> str:
    """Label for messages; "anonymous" when there is no role."""
    profile = profile_for(role)
    return profile.label if profile is not None else ANONYMOUS_LABEL
