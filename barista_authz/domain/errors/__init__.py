"""Domain errors package.

Usage:
    from barista_authz.domain.errors import AccessDenied, ConfigurationError
"""

from barista_authz.domain.errors.authorization_error import (
    AccessDenied,
    ConfigurationError,
    RequirementType,
)

__all__ = [
    "AccessDenied",
    "ConfigurationError",
    "RequirementType",
]
