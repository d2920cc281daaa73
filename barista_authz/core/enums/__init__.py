"""Core enums package.

Usage:
    from barista_authz.core.enums import ErrorCode, Environment
"""

from barista_authz.core.enums.environment import Environment
from barista_authz.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
