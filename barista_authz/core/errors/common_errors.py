"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (bad policy file, unknown value)

Usage:
    from barista_authz.core.errors import ValidationError
    from barista_authz.core.enums import ErrorCode
    from barista_authz.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.POLICY_FILE_INVALID,
        message="Policy file is not valid JSON",
        field="role_permissions",
    ))
"""

from dataclasses import dataclass

from barista_authz.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None

