"""Domain layer - Pure authorization logic.

This layer contains the catalogs (enums), the authorization matrices, the
evaluation services and the protocols (ports) other layers depend on. It has
NO dependencies on any framework or infrastructure - it is pure Python.

Structure:
- enums/: Closed vocabularies (roles, modules, actions, permissions)
- entities/: The authenticated user record handed in by authentication
- policies/: Role -> permission and role -> module matrices
- services/: Pure evaluation functions and the role hierarchy
- value_objects/: Immutable role presentation data
- errors/: Denial records and configuration errors
- protocols/: Ports implemented elsewhere
"""
