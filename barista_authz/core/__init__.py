"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Application configuration

The core module has NO dependencies on other application layers.
"""

from barista_authz.core.errors import DomainError, ValidationError
from barista_authz.core.enums import ErrorCode
from barista_authz.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
]
