"""Permission components for RBAC authorization.

This module defines the Action and Permission enums. Permissions are
namespaced strings of the form "<module>.<action>" (e.g. "menu.edit",
"reports.advanced"). The namespace is always an AdminModule value and the
suffix an Action value; the startup catalog check enforces it.

Usage:
    from barista_authz.domain.enums import Permission

    # Evaluation
    allowed = has_permission(user, Permission.MENU_EDIT)

    # FastAPI dependency
    @router.put("/menu/{item_id}")
    async def update_item(
        user: Annotated[AuthenticatedUser, Depends(require_permission(Permission.MENU_EDIT))],
    ):
        ...
"""

from enum import Enum

from barista_authz.domain.enums.admin_module import AdminModule


class Action(str, Enum):
    """Actions a permission grants inside a module.

    Action Semantics:
        VIEW: Read access to the module's screens and data
        CREATE / EDIT / DELETE: Write access
        CANCEL: Cancel orders or reservations
        ADVANCED: Advanced views (detailed dashboards, advanced reports)
        SEND / RESPOND / MANAGE / RESTORE: Module-specific operations
    """

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    CANCEL = "cancel"
    ADVANCED = "advanced"
    SEND = "send"
    RESTORE = "restore"
    MANAGE = "manage"
    RESPOND = "respond"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]


class Permission(str, Enum):
    """Closed catalog of grantable permissions.

    Adding a member here means deciding, in domain/policies/role_matrix.py,
    which roles receive it. A permission no role holds is denied to everyone.
    """

    DASHBOARD_VIEW = "dashboard.view"
    DASHBOARD_ADVANCED = "dashboard.advanced"

    MENU_VIEW = "menu.view"
    MENU_CREATE = "menu.create"
    MENU_EDIT = "menu.edit"
    MENU_DELETE = "menu.delete"

    ORDERS_VIEW = "orders.view"
    ORDERS_CREATE = "orders.create"
    ORDERS_EDIT = "orders.edit"
    ORDERS_CANCEL = "orders.cancel"

    RESERVATIONS_VIEW = "reservations.view"
    RESERVATIONS_CREATE = "reservations.create"
    RESERVATIONS_EDIT = "reservations.edit"
    RESERVATIONS_CANCEL = "reservations.cancel"

    CUSTOMERS_VIEW = "customers.view"
    CUSTOMERS_CREATE = "customers.create"
    CUSTOMERS_EDIT = "customers.edit"
    CUSTOMERS_DELETE = "customers.delete"

    INVENTORY_VIEW = "inventory.view"
    INVENTORY_CREATE = "inventory.create"
    INVENTORY_EDIT = "inventory.edit"
    INVENTORY_DELETE = "inventory.delete"

    SCHEDULE_VIEW = "schedule.view"
    SCHEDULE_CREATE = "schedule.create"
    SCHEDULE_EDIT = "schedule.edit"
    SCHEDULE_DELETE = "schedule.delete"

    USERS_VIEW = "users.view"
    USERS_CREATE = "users.create"
    USERS_EDIT = "users.edit"
    USERS_DELETE = "users.delete"

    PERMISSIONS_VIEW = "permissions.view"
    PERMISSIONS_EDIT = "permissions.edit"

    REPORTS_VIEW = "reports.view"
    REPORTS_CREATE = "reports.create"
    REPORTS_ADVANCED = "reports.advanced"

    ANALYTICS_VIEW = "analytics.view"
    ANALYTICS_ADVANCED = "analytics.advanced"

    NOTIFICATIONS_VIEW = "notifications.view"
    NOTIFICATIONS_SEND = "notifications.send"

    BACKUP_VIEW = "backup.view"
    BACKUP_CREATE = "backup.create"
    BACKUP_RESTORE = "backup.restore"

    MAINTENANCE_VIEW = "maintenance.view"
    MAINTENANCE_ADVANCED = "maintenance.advanced"

    SUPPLIERS_VIEW = "suppliers.view"
    SUPPLIERS_EDIT = "suppliers.edit"

    TABLES_VIEW = "tables.view"
    TABLES_EDIT = "tables.edit"

    DELIVERY_VIEW = "delivery.view"
    DELIVERY_MANAGE = "delivery.manage"

    EVENTS_VIEW = "events.view"
    EVENTS_CREATE = "events.create"
    EVENTS_EDIT = "events.edit"

    FEEDBACK_VIEW = "feedback.view"
    FEEDBACK_RESPOND = "feedback.respond"

    QUALITY_VIEW = "quality.view"
    QUALITY_MANAGE = "quality.manage"

    ACTIVITY_LOGS_VIEW = "activity_logs.view"

    SETTINGS_VIEW = "settings.view"
    SETTINGS_EDIT = "settings.edit"

    @property
    def module(self) -> AdminModule:
        """Module this permission lives in (the part before the dot)."""
        namespace, _, _ = self.value.partition(".")
        return AdminModule(namespace)

    @property
    def action(self) -> Action:
        """Action this permission grants (the part after the dot)."""
        _, _, action = self.value.partition(".")
        return Action(action)

    @classmethod
    def values(cls) -> list[str]:
        """Get all permission values as strings.

        Returns:
            list[str]: List of permission values.
        """
        return [permission.value for permission in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid permission.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid permission.
        """
        return value in cls.values()

    @classmethod
    def for_module(cls, module: AdminModule) -> list["Permission"]:
        """Get every permission in a module's namespace.

        Args:
            module: Module to filter on.

        Returns:
            list[Permission]: Permissions whose namespace is the module, in
                catalog order.
        """
        prefix = f"{module.value}."
        return [permission for permission in cls if permission.value.startswith(prefix)]
