"""Domain services.

- permission_evaluator: matrix-membership evaluation (authoritative)
- role_hierarchy: ordinal role comparison for role gates only

Import from the submodules directly; this package does not re-export them.
"""
