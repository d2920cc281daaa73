"""Authorization policy infrastructure."""

from barista_authz.infrastructure.authorization.policy_loader import (
    PolicyDocument,
    load_policy_document,
)

__all__ = ["PolicyDocument", "load_policy_document"]
