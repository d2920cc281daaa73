"""JSON policy file loader.

Lets a deployment replace the compiled-in role matrices with a JSON document
read once at startup. The document shape is checked here with Pydantic; the
values themselves (roles, permissions, modules) are checked against the
catalogs when the document is turned into an AuthorizationMatrix.

File format:
    {
      "role_permissions": {"directeur": ["menu.view", ...], ...},
      "role_modules": {"directeur": ["menu", ...], ...}
    }
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from barista_authz.core.enums import ErrorCode
from barista_authz.core.errors import ValidationError
from barista_authz.core.result import Failure, Result, Success
from barista_authz.domain.policies import AuthorizationMatrix


class PolicyDocument(BaseModel):
    """Raw role bindings as written in a policy file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    role_permissions: dict[str, list[str]] = Field(
        description="Role name -> permission strings ('<module>.<action>')",
    )
    role_modules: dict[str, list[str]] = Field(
        description="Role name -> module strings",
    )

    def to_matrix(self) -> AuthorizationMatrix:
        """Convert to a catalog-checked matrix.

        Returns:
            AuthorizationMatrix: Matrix built from the document.

        Raises:
            ConfigurationError: If a role, permission or module is unknown.
        """
        return AuthorizationMatrix.from_mapping(
            role_permissions=self.role_permissions,
            role_modules=self.role_modules,
        )


def load_policy_document(path: Path) -> Result[PolicyDocument, ValidationError]:
    """Read and shape-check a policy file.

    Args:
        path: JSON file to read.

    Returns:
        Success(PolicyDocument) when the file exists and has the expected
        shape; Failure(ValidationError) otherwise.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Failure(
            error=ValidationError(
                code=ErrorCode.POLICY_FILE_NOT_FOUND,
                message=f"Policy file not found: {path}",
                field="authorization_policy_file",
            )
        )
    except UnicodeDecodeError as e:
        return Failure(
            error=ValidationError(
                code=ErrorCode.POLICY_FILE_INVALID,
                message=f"Policy file {path} is not valid UTF-8",
                field="authorization_policy_file",
                details={"position": str(e.start)},
            )
        )
    except OSError as e:
        return Failure(
            error=ValidationError(
                code=ErrorCode.POLICY_FILE_INVALID,
                message=f"Policy file could not be read: {e}",
                field="authorization_policy_file",
            )
        )

    try:
        document = PolicyDocument.model_validate_json(raw)
    except PydanticValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ())) or None
        return Failure(
            error=ValidationError(
                code=ErrorCode.POLICY_FILE_INVALID,
                message=f"Policy file {path} is invalid: {e.error_count()} error(s)",
                field=location,
                details={"first_error": str(first.get("msg", ""))},
            )
        )

    return Success(value=document)
