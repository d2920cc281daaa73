"""API v1 routers.

RESTful resource-based endpoints.

Resources:
    /api/v1/permissions/me            - Caller's effective access
    /api/v1/permissions/roles         - Role bindings
    /api/v1/permissions/roles/{role}  - One role's bindings
"""

from fastapi import APIRouter

from barista_authz.core.config import settings
from barista_authz.presentation.api.v1.permissions import router as permissions_router

# Create combined v1 router
v1_router = APIRouter(prefix=settings.api_v1_prefix)

# Include all resource routers
v1_router.include_router(permissions_router)

# Export individual routers for testing
__all__ = [
    "v1_router",
    "permissions_router",
]
