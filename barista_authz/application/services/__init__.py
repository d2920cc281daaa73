"""Application services.

Services that compose domain evaluation with infrastructure concerns
(logging) for use by the presentation layer.
"""

from barista_authz.application.services.access_guard import AccessGuard

__all__ = ["AccessGuard"]
