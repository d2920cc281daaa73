"""Authenticated user record.

The only input the authorization engine receives about a person. It is built
by the authentication layer after identity has been verified (login, token or
session validation) and handed to the engine as-is. The engine never mutates
it and never re-checks identity.
"""

from dataclasses import dataclass

from barista_authz.domain.enums import Permission, UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticatedUser:
    """Logged-in user as seen by the authorization engine.

    Attributes:
        id: User identifier from the user store.
        role: Role assigned by user management.
        is_active: False for disabled accounts; inactive users are denied
            everything.
        email: Email address, for display and logging.
        first_name: Given name, for display.
        last_name: Family name, for display.
        permissions: Explicit permission list attached by user management.
            Carried for display; evaluation uses the role matrices only.
    """

    id: int
    role: UserRole
    is_active: bool = True
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    permissions: tuple[Permission, ...] | None = None

    @property
    def display_name(self) -> str:
        """Full name when known, otherwise email, otherwise the id."""
        full_name = " ".join(
            part for part in (self.first_name, self.last_name) if part
        )
        return full_name or self.email or str(self.id)
