"""Request/response schemas for API endpoints.

Pydantic models for HTTP response serialization. Schemas are kept separate
from domain entities (HTTP-layer concerns only).

Usage:
    from barista_authz.schemas import MyPermissionsResponse
"""

from barista_authz.schemas.permission_schemas import (
    AccessDeniedResponse,
    MyPermissionsResponse,
    NavigationItem,
    RolePermissionsResponse,
    RolesListResponse,
)

__all__ = [
    "AccessDeniedResponse",
    "MyPermissionsResponse",
    "NavigationItem",
    "RolePermissionsResponse",
    "RolesListResponse",
]
