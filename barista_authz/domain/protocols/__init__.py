"""Domain protocols (ports) package.

Infrastructure and domain services implement these protocols without
inheritance (PEP 544 structural subtyping).

Usage:
    from barista_authz.domain.protocols import AuthorizationProtocol, LoggerProtocol
"""

from barista_authz.domain.protocols.authorization_protocol import AuthorizationProtocol
from barista_authz.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AuthorizationProtocol",
    "LoggerProtocol",
]
