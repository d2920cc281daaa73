"""Permission request/response schemas.

Pydantic models for the permissions API and the 403 denial body.
Kept separate from domain entities - these are HTTP-layer concerns.

RESTful Endpoints:
    GET /api/v1/permissions/me            - Current user's access
    GET /api/v1/permissions/roles         - Role matrix overview
    GET /api/v1/permissions/roles/{role}  - One role's bindings
"""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Denial body
# =============================================================================


class AccessDeniedResponse(BaseModel):
    """403 body returned when a request-handler guard denies.

    Field names are camelCase on the wire; the console reads them as-is.
    """

    success: bool = Field(default=False, description="Always false")
    message: str = Field(..., description="Non-revealing denial message")
    required_permission: str | list[str] = Field(
        ...,
        serialization_alias="requiredPermission",
        description="Missing requirement: one value, or the list when several",
    )
    user_role: str | None = Field(
        None,
        serialization_alias="userRole",
        description="Role of the denied user (null when unauthenticated)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "Access denied: permission 'menu.edit' required "
                "(current role: Employee)",
                "requiredPermission": "menu.edit",
                "userRole": "employe",
            }
        }
    )


# =============================================================================
# Current user
# =============================================================================


class NavigationItem(BaseModel):
    """Console navigation entry for a reachable module."""

    module: str = Field(..., description="Module identifier")
    label: str = Field(..., description="Display label")
    route: str = Field(..., description="Console route of the module")


class MyPermissionsResponse(BaseModel):
    """Response schema for GET /permissions/me."""

    user_id: int = Field(..., description="User identifier")
    display_name: str = Field(..., description="Full name, email or id")
    role: str = Field(..., description="Role identifier")
    role_label: str = Field(..., description="Role display label")
    role_color: str = Field(..., description="Role badge colour")
    landing_route: str = Field(..., description="Route opened after login")
    permissions: list[str] = Field(
        default_factory=list,
        description="Effective permissions, catalog order",
    )
    modules: list[str] = Field(
        default_factory=list,
        description="Reachable modules, navigation order",
    )
    navigation: list[NavigationItem] = Field(
        default_factory=list,
        description="Navigation entries for reachable modules",
    )


# =============================================================================
# Role matrix
# =============================================================================


class RolePermissionsResponse(BaseModel):
    """Response schema for one role's bindings.

    Used in GET /permissions/roles/{role} and as list item.
    """

    role: str = Field(..., description="Role identifier")
    label: str = Field(..., description="Role display label")
    description: str = Field(..., description="What the role covers")
    color: str = Field(..., description="Role badge colour")
    permissions: list[str] = Field(
        default_factory=list,
        description="Granted permissions, catalog order",
    )
    modules: list[str] = Field(
        default_factory=list,
        description="Granted modules, navigation order",
    )


class RolesListResponse(BaseModel):
    """Response schema for GET /permissions/roles."""

    roles: list[RolePermissionsResponse] = Field(
        default_factory=list,
        description="Every role, highest privilege first",
    )
    total_permissions: int = Field(..., description="Size of the permission catalog")
    total_modules: int = Field(..., description="Size of the module catalog")
