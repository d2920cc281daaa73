"""Authorization policies (role matrices).

Usage:
    from barista_authz.domain.policies import DEFAULT_MATRIX, AuthorizationMatrix
"""

from barista_authz.domain.policies.role_matrix import (
    DEFAULT_MATRIX,
    ROLE_MODULES,
    ROLE_PERMISSIONS,
    AuthorizationMatrix,
    validate_catalog,
)

__all__ = [
    "DEFAULT_MATRIX",
    "ROLE_MODULES",
    "ROLE_PERMISSIONS",
    "AuthorizationMatrix",
    "validate_catalog",
]
