"""Domain entities."""

from barista_authz.domain.entities.authenticated_user import AuthenticatedUser

__all__ = ["AuthenticatedUser"]
