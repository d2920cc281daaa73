"""User roles for the admin console.

Role Hierarchy (see domain/services/role_hierarchy.py):
    directeur > gerant > employe

    - directeur: Full access, including permissions and system settings
    - gerant: Operational management, no system administration
    - employe: Daily operations and customer service

Usage:
    from barista_authz.domain.enums import UserRole

    if user.role == UserRole.DIRECTOR:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for RBAC authorization.

    String Enum:
        Inherits from str for easy serialization. Values are the role names
        stored on user records by the user-management side of the app.
    """

    DIRECTOR = "directeur"
    """Café director. Every permission and every module."""

    MANAGER = "gerant"
    """Shift / floor manager. Operational management without system administration."""

    EMPLOYEE = "employe"
    """Staff member. Orders, reservations, tables and read access elsewhere."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['directeur', 'gerant', 'employe'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
