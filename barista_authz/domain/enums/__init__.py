"""Domain enums for authorization.

The closed vocabularies used everywhere else. Values are lowercase strings
matching what the authentication layer and the admin console exchange.

Available Enums:
    - UserRole: Roles (directeur, gerant, employe)
    - AdminModule: Feature areas of the admin console
    - Action: Verbs a permission grants inside a module
    - Permission: Namespaced "<module>.<action>" grants
"""

from barista_authz.domain.enums.admin_module import AdminModule
from barista_authz.domain.enums.permission import Action, Permission
from barista_authz.domain.enums.user_role import UserRole

__all__ = [
    "AdminModule",
    "Action",
    "Permission",
    "UserRole",
]
