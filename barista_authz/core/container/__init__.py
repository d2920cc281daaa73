"""Container module - Centralized dependency injection.

The container is the composition root: it decides which adapters back each
protocol and owns the app-scoped singletons.

- infrastructure: logging
- authorization: validated matrix, evaluator and access guard

Usage:
    from barista_authz.core.container import get_authorization, get_logger
"""

from barista_authz.core.container.authorization import (
    get_access_guard,
    get_authorization,
    get_authorization_matrix,
    init_authorization,
    reset_authorization,
)
from barista_authz.core.container.infrastructure import get_logger

__all__ = [
    "get_access_guard",
    "get_authorization",
    "get_authorization_matrix",
    "get_logger",
    "init_authorization",
    "reset_authorization",
]
