"""Admin console modules (feature areas).

A module is coarser than a permission: it decides whether a user may enter a
screen or route group at all. Module checks run before any permission check
for the same area.
"""

from enum import Enum


class AdminModule(str, Enum):
    """Feature areas of the admin console.

    Declaration order is the navigation order.
    """

    DASHBOARD = "dashboard"
    MENU = "menu"
    ORDERS = "orders"
    RESERVATIONS = "reservations"
    CUSTOMERS = "customers"
    INVENTORY = "inventory"
    SCHEDULE = "schedule"
    USERS = "users"
    PERMISSIONS = "permissions"
    REPORTS = "reports"
    ANALYTICS = "analytics"
    NOTIFICATIONS = "notifications"
    BACKUP = "backup"
    MAINTENANCE = "maintenance"
    SUPPLIERS = "suppliers"
    TABLES = "tables"
    DELIVERY = "delivery"
    EVENTS = "events"
    FEEDBACK = "feedback"
    QUALITY = "quality"
    ACTIVITY_LOGS = "activity_logs"
    SETTINGS = "settings"

    @property
    def label(self) -> str:
        """Human-readable module name for navigation and denial notices."""
        return _MODULE_LABELS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Get all module values as strings.

        Returns:
            list[str]: List of module values in navigation order.
        """
        return [module.value for module in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid module.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid module.
        """
        return value in cls.values()


_MODULE_LABELS: dict[AdminModule, str] = {
    AdminModule.DASHBOARD: "Dashboard",
    AdminModule.MENU: "Menu",
    AdminModule.ORDERS: "Orders",
    AdminModule.RESERVATIONS: "Reservations",
    AdminModule.CUSTOMERS: "Customers",
    AdminModule.INVENTORY: "Inventory",
    AdminModule.SCHEDULE: "Staff Schedule",
    AdminModule.USERS: "Users",
    AdminModule.PERMISSIONS: "Permissions",
    AdminModule.REPORTS: "Reports",
    AdminModule.ANALYTICS: "Analytics",
    AdminModule.NOTIFICATIONS: "Notifications",
    AdminModule.BACKUP: "Backup",
    AdminModule.MAINTENANCE: "Maintenance",
    AdminModule.SUPPLIERS: "Suppliers",
    AdminModule.TABLES: "Tables",
    AdminModule.DELIVERY: "Delivery",
    AdminModule.EVENTS: "Events",
    AdminModule.FEEDBACK: "Customer Feedback",
    AdminModule.QUALITY: "Quality Control",
    AdminModule.ACTIVITY_LOGS: "Activity Logs",
    AdminModule.SETTINGS: "Settings",
}
