"""Core errors package.

Usage:
    from barista_authz.core.errors import DomainError, ValidationError
"""

from barista_authz.core.errors.common_errors import ValidationError
from barista_authz.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
]
