"""HTTP exception carrying a denial record.

Raised by the request-handler guards; rendered by the exception handler
registered in presentation/api/v1/errors/exception_handlers.py.
"""

from fastapi import HTTPException, status

from barista_authz.domain.errors import AccessDenied, RequirementType


class AccessDeniedError(HTTPException):
    """Request denied by an authorization guard.

    Status is 401 when the route needs a signed-in user and there is none,
    403 for inactive accounts and for every permission, module and role
    denial.

    Attributes:
        denial: The denial record (requirement and role).
    """

    def __init__(self, denial: AccessDenied) -> None:
        self.denial = denial
        super().__init__(
            status_code=(
                status.HTTP_401_UNAUTHORIZED
                if denial.requirement_type is RequirementType.AUTHENTICATION
                and denial.user_role is None
                else status.HTTP_403_FORBIDDEN
            ),
            detail=denial.message,
        )
