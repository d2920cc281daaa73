"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Authentication errors (AUTHENTICATION_*, ACCOUNT_*)
- Authorization errors (PERMISSION_*, MODULE_*, ROLE_*, EMPTY_REQUIREMENT)
- Configuration errors (POLICY_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Authentication errors
    AUTHENTICATION_REQUIRED = "authentication_required"
    ACCOUNT_INACTIVE = "account_inactive"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    MODULE_ACCESS_DENIED = "module_access_denied"
    ROLE_REQUIRED = "role_required"
    EMPTY_REQUIREMENT = "empty_requirement"

    # Policy configuration errors
    POLICY_FILE_NOT_FOUND = "policy_file_not_found"
    POLICY_FILE_INVALID = "policy_file_invalid"
