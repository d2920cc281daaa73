"""API error handling.

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from barista_authz.presentation.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["register_exception_handlers"]
