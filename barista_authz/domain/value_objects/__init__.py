"""Domain value objects (immutable, no identity)."""

from barista_authz.domain.value_objects.role_profile import (
    ROLE_PROFILES,
    RoleProfile,
    profile_for,
)

__all__ = ["ROLE_PROFILES", "RoleProfile", "profile_for"]
