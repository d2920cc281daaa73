"""Result types for railway-oriented programming.

Operations that can fail without it being exceptional (an authorization
denial, an unreadable policy file) return a Result instead of raising.

Usage:
    def check(user: AuthenticatedUser | None) -> Result[AuthenticatedUser, AccessDenied]:
        if user is None:
            return Failure(error=denial)
        return Success(value=user)

    match check(user):
        case Success(value=user):
            ...
        case Failure(error=denial):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
