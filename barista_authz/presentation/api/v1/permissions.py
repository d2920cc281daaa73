"""Permissions resource router.

Read-only view of the authorization configuration.

Endpoints:
    GET /api/v1/permissions/me            - Current user's role, permissions and navigation
    GET /api/v1/permissions/roles         - Bindings of every role
    GET /api/v1/permissions/roles/{role}  - Bindings of one role
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from barista_authz.core.container import get_authorization, get_authorization_matrix
from barista_authz.domain.entities import AuthenticatedUser
from barista_authz.domain.enums import AdminModule, Permission, UserRole
from barista_authz.domain.policies import AuthorizationMatrix
from barista_authz.domain.protocols.authorization_protocol import AuthorizationProtocol
from barista_authz.domain.value_objects import profile_for
from barista_authz.presentation.api.middleware.auth_dependencies import CurrentUser
from barista_authz.presentation.api.middleware.authorization_dependencies import (
    require_module_permissions,
)
from barista_authz.schemas import (
    AccessDeniedResponse,
    MyPermissionsResponse,
    NavigationItem,
    RolePermissionsResponse,
    RolesListResponse,
)

router = APIRouter(prefix="/permissions", tags=["Permissions"])

_DENIAL_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"model": AccessDeniedResponse, "description": "No signed-in user"},
    403: {"model": AccessDeniedResponse, "description": "Access denied"},
}

PermissionsViewer = Annotated[
    AuthenticatedUser,
    Depends(
        require_module_permissions(AdminModule.PERMISSIONS, Permission.PERMISSIONS_VIEW)
    ),
]


def _module_route(landing_route: str, module: AdminModule) -> str:
    return f"{landing_route}/{module.value.replace('_', '-')}"


def _role_bindings(matrix: AuthorizationMatrix, role: UserRole) -> RolePermissionsResponse:
    profile = profile_for(role)
    granted_permissions = matrix.permissions_of(role)
    granted_modules = matrix.modules_of(role)
    return RolePermissionsResponse(
        role=role.value,
        label=profile.label if profile else role.value,
        description=profile.description if profile else "",
        color=profile.color if profile else "",
        permissions=[p.value for p in Permission if p in granted_permissions],
        modules=[m.value for m in AdminModule if m in granted_modules],
    )


@router.get(
    "/me",
    response_model=MyPermissionsResponse,
    responses={401: _DENIAL_RESPONSES[401]},
    summary="Get current user's access",
    description="Effective permissions, reachable modules and navigation of the caller.",
)
async def get_my_permissions(
    current_user: CurrentUser,
    authorization: Annotated[AuthorizationProtocol, Depends(get_authorization)],
) -> MyPermissionsResponse:
    """Get the caller's effective access.

    Args:
        current_user: Signed-in, active user.
        authorization: Evaluation engine (injected).

    Returns:
        MyPermissionsResponse: Role, permissions, modules and navigation.
    """
    profile = profile_for(current_user.role)
    landing_route = profile.landing_route if profile else "/"
    modules = authorization.accessible_modules(current_user)

    return MyPermissionsResponse(
        user_id=current_user.id,
        display_name=current_user.display_name,
        role=current_user.role.value,
        role_label=profile.label if profile else current_user.role.value,
        role_color=profile.color if profile else "",
        landing_route=landing_route,
        permissions=[p.value for p in authorization.effective_permissions(current_user)],
        modules=[m.value for m in modules],
        navigation=[
            NavigationItem(
                module=module.value,
                label=module.label,
                route=_module_route(landing_route, module),
            )
            for module in modules
        ],
    )


@router.get(
    "/roles",
    response_model=RolesListResponse,
    responses=_DENIAL_RESPONSES,
    summary="List role bindings",
    description="Permissions and modules granted to every role.",
)
async def list_roles(
    _: PermissionsViewer,
    matrix: Annotated[AuthorizationMatrix, Depends(get_authorization_matrix)],
) -> RolesListResponse:
    """List every role with its bindings, highest privilege first."""
    return RolesListResponse(
        roles=[_role_bindings(matrix, role) for role in UserRole],
        total_permissions=len(Permission),
        total_modules=len(AdminModule),
    )


@router.get(
    "/roles/{role}",
    response_model=RolePermissionsResponse,
    responses={
        **_DENIAL_RESPONSES,
        404: {"description": "Unknown role"},
    },
    summary="Get role bindings",
    description="Permissions and modules granted to one role.",
)
async def get_role(
    _: PermissionsViewer,
    matrix: Annotated[AuthorizationMatrix, Depends(get_authorization_matrix)],
    role: str = Path(..., description="Role identifier (directeur, gerant, employe)"),
) -> RolePermissionsResponse:
    """Get one role's bindings.

    Raises:
        HTTPException 404: If the role does not exist.
    """
    if not UserRole.is_valid(role):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown role: {role}",
        )
    return _role_bindings(matrix, UserRole(role))
