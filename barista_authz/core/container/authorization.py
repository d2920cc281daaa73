"""Authorization dependency factories.

The role matrices are loaded and validated once, at application startup,
before the first request is evaluated. After that they are read-only.

Reference:
    - barista_authz/domain/policies/role_matrix.py
    - barista_authz/domain/services/permission_evaluator.py
"""

from typing import TYPE_CHECKING

from barista_authz.core.config import Settings, settings
from barista_authz.core.container.infrastructure import get_logger
from barista_authz.core.result import Failure, Success
from barista_authz.domain.errors import ConfigurationError
from barista_authz.domain.policies import DEFAULT_MATRIX, AuthorizationMatrix, validate_catalog

if TYPE_CHECKING:
    from barista_authz.application.services.access_guard import AccessGuard
    from barista_authz.domain.protocols.authorization_protocol import AuthorizationProtocol


# Module-level state for matrix singleton
_matrix: AuthorizationMatrix | None = None


# ============================================================================
# Authorization (role matrices)
# ============================================================================


def init_authorization(config: Settings | None = None) -> AuthorizationMatrix:
    """Load, validate and install the role matrices.

    Steps:
    1. Check the enum catalogs against each other
    2. Load the policy file when configured, else use the compiled-in matrices
    3. Validate the matrices (totality, module coverage, role nesting)

    MUST be called during FastAPI lifespan startup.

    Args:
        config: Settings to read (defaults to the process settings).

    Returns:
        The installed matrix.

    Raises:
        RuntimeError: If authorization is already initialized.
        ConfigurationError: If the catalogs, the policy file or the matrices
            are invalid. The application must not start.
    """
    global _matrix

    if _matrix is not None:
        raise RuntimeError("Authorization already initialized")

    config = config or settings
    logger = get_logger()

    try:
        validate_catalog()
        matrix = _load_matrix(config)
        matrix.validate(
            require_nested_roles=config.authorization_require_nested_roles,
            require_module_coverage=config.authorization_require_module_coverage,
        )
    except ConfigurationError as e:
        logger.critical(
            "authorization_configuration_invalid",
            error=e,
            problems=e.problems,
        )
        raise

    _matrix = matrix
    logger.info(
        "authorization_initialized",
        source=str(config.authorization_policy_file or "compiled-in"),
        roles=len(matrix.role_permissions),
    )
    return _matrix


def _load_matrix(config: Settings) -> AuthorizationMatrix:
    if config.authorization_policy_file is None:
        return DEFAULT_MATRIX

    from barista_authz.infrastructure.authorization.policy_loader import (
        load_policy_document,
    )

    match load_policy_document(config.authorization_policy_file):
        case Success(value=document):
            return document.to_matrix()
        case Failure(error=err):
            raise ConfigurationError([err.message])


def reset_authorization() -> None:
    """Forget the installed matrix (tests and application shutdown)."""
    global _matrix
    _matrix = None


def get_authorization_matrix() -> AuthorizationMatrix:
    """Get the installed matrix.

    MUST be called after init_authorization() during startup.

    Returns:
        The validated matrix.

    Raises:
        RuntimeError: If called before init_authorization().
    """
    if _matrix is None:
        raise RuntimeError(
            "Authorization not initialized. Call init_authorization() during startup."
        )
    return _matrix


def get_authorization() -> "AuthorizationProtocol":
    """Get the authorization evaluator.

    Returns:
        PermissionEvaluator bound to the installed matrix.

    Usage:
        # Presentation Layer (FastAPI endpoint)
        @router.get("/menu")
        async def list_menu(
            authz: Annotated[AuthorizationProtocol, Depends(get_authorization)],
            user: Annotated[AuthenticatedUser | None, Depends(get_current_user)],
        ):
            if authz.has_permission(user, Permission.MENU_VIEW):
                ...
    """
    from barista_authz.domain.services.permission_evaluator import PermissionEvaluator

    return PermissionEvaluator(get_authorization_matrix())


def get_access_guard() -> "AccessGuard":
    """Get the access guard (evaluator + denial logging).

    Returns:
        AccessGuard using the installed matrix and the app logger.
    """
    from barista_authz.application.services.access_guard import AccessGuard

    return AccessGuard(evaluator=get_authorization(), logger=get_logger())
