"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports) and the
readers for external configuration:
- logging/: Structured logging adapters (structlog)
- authorization/: Policy file loading

The infrastructure layer depends on the domain layer but the domain layer
does NOT depend on infrastructure.
"""
