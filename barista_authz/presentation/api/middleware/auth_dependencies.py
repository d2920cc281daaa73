"""Current-user dependencies.

Identity is established upstream: the authentication layer (session or
token middleware) verifies the caller and stores an AuthenticatedUser on
``request.state.user``. These dependencies only read it back; they never
authenticate anyone themselves.

Usage:
    # Optional user (anonymous allowed)
    @router.get("/public")
    async def public_route(current_user: OptionalUser):
        if current_user:
            ...

    # Required user
    @router.get("/me")
    async def me(current_user: CurrentUser):
        return {"user_id": current_user.id}
"""

from typing import Annotated

from fastapi import Depends, Request

from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.errors import AccessDenied
from barista_authz.presentation.api.middleware.access_denied_error import (
    AccessDeniedError,
)


async def get_current_user_optional(request: Request) -> AuthenticatedUser | None:
    """Get the user placed on the request by authentication, None otherwise.

    Anything other than an AuthenticatedUser on ``request.state.user`` is
    treated as no user.

    Args:
        request: Incoming request.

    Returns:
        AuthenticatedUser if authentication attached one, None otherwise.
    """
    user = getattr(request.state, "user", None)
    if isinstance(user, AuthenticatedUser):
        return user
    return None


async def get_current_user(
    user: Annotated[AuthenticatedUser | None, Depends(get_current_user_optional)],
) -> AuthenticatedUser:
    """Get the current user, denying anonymous and inactive callers.

    Args:
        user: User from the request, if any.

    Returns:
        The active authenticated user.

    Raises:
        AccessDeniedError: If there is no user or the account is inactive.
    """
    if user is None or not user.is_active:
        raise AccessDeniedError(AccessDenied.for_authentication(user))
    return user


OptionalUser = Annotated[AuthenticatedUser | None, Depends(get_current_user_optional)]
CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
