"""Global exception handlers for FastAPI application.

This module converts authorization denials into the JSON body the admin
console expects, and catches unhandled exceptions so stack traces never
reach API consumers.

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from barista_authz.core.container import get_logger
from barista_authz.presentation.api.middleware.access_denied_error import (
    AccessDeniedError,
)
from barista_authz.schemas import AccessDeniedResponse


async def access_denied_handler(
    request: Request, exc: AccessDeniedError
) -> JSONResponse:
    """Render a guard denial.

    Body:
        {"success": false, "message": ..., "requiredPermission": ...,
         "userRole": ...}

    ``requiredPermission`` is a string when one value is required and the
    list otherwise.

    Args:
        request: FastAPI Request object
        exc: AccessDeniedError raised by a dependency

    Returns:
        JSONResponse with the denial body (401 or 403)
    """
    denial = exc.denial
    required: str | list[str] = (
        denial.required[0] if len(denial.required) == 1 else list(denial.required)
    )
    body = AccessDeniedResponse(
        message=denial.message,
        required_permission=required,
        user_role=denial.user_role.value if denial.user_role else None,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(by_alias=True),
        headers=exc.headers,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Prevents leaking stack traces or internal details to API consumers.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse (500 Internal Server Error)
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "An unexpected error occurred.",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    This function should be called during application initialization
    to register global exception handlers.

    Args:
        app: FastAPI application instance

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(AccessDeniedError, access_denied_handler)  # type: ignore[arg-type]

    # Handle all unhandled exceptions
    app.add_exception_handler(Exception, generic_exception_handler)
