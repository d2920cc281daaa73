"""Role -> permission and role -> module matrices.

Permission format:  "<module>.<action>"  (see domain/enums/permission.py)

    - directeur: every permission, every module
    - gerant:    operational management; no permission administration,
                 backups or system settings
    - employe:   daily operations (orders, reservations, tables) and read
                 access to the rest of the floor

The matrices are immutable and built once per process. Lookups are total:
a role with no entry (or no role at all) resolves to the empty set, so a gap
in the matrix denies rather than allows.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from barista_authz.domain.enums import Action, AdminModule, Permission, UserRole
from barista_authz.domain.errors import ConfigurationError
from barista_authz.domain.services.role_hierarchy import ROLE_RANK, roles_below

_EMPTY_PERMISSIONS: frozenset[Permission] = frozenset()
_EMPTY_MODULES: frozenset[AdminModule] = frozenset()


@dataclass(frozen=True, slots=True)
class AuthorizationMatrix:
    """Immutable role bindings.

    Attributes:
        role_permissions: Role -> granted permissions.
        role_modules: Role -> reachable modules.
    """

    role_permissions: Mapping[UserRole, frozenset[Permission]]
    role_modules: Mapping[UserRole, frozenset[AdminModule]]

    def __post_init__(self) -> None:
        # Freeze whatever mappings/iterables were passed in.
        object.__setattr__(
            self,
            "role_permissions",
            MappingProxyType(
                {role: frozenset(perms) for role, perms in self.role_permissions.items()}
            ),
        )
        object.__setattr__(
            self,
            "role_modules",
            MappingProxyType(
                {role: frozenset(mods) for role, mods in self.role_modules.items()}
            ),
        )

    def permissions_of(self, role: UserRole | None) -> frozenset[Permission]:
        """Permissions granted to a role.

        Args:
            role: Role to look up.

        Returns:
            frozenset[Permission]: Granted permissions; empty for a missing
                or unknown role.
        """
        if role is None:
            return _EMPTY_PERMISSIONS
        return self.role_permissions.get(role, _EMPTY_PERMISSIONS)

    def modules_of(self, role: UserRole | None) -> frozenset[AdminModule]:
        """Modules reachable by a role.

        Args:
            role: Role to look up.

        Returns:
            frozenset[AdminModule]: Reachable modules; empty for a missing or
                unknown role.
        """
        if role is None:
            return _EMPTY_MODULES
        return self.role_modules.get(role, _EMPTY_MODULES)

    @classmethod
    def from_mapping(
        cls,
        role_permissions: Mapping[str, Iterable[str]],
        role_modules: Mapping[str, Iterable[str]],
    ) -> "AuthorizationMatrix":
        """Build a matrix from raw strings (policy files, fixtures).

        Every role, permission and module string is checked against its
        catalog. Roles absent from a mapping get an empty set.

        Args:
            role_permissions: Role name -> permission strings.
            role_modules: Role name -> module strings.

        Returns:
            AuthorizationMatrix: Validated matrix.

        Raises:
            ConfigurationError: If any value is missing from its catalog.
                Lists every unknown value, not just the first.
        """
        problems: list[str] = []
        permissions: dict[UserRole, set[Permission]] = {role: set() for role in UserRole}
        modules: dict[UserRole, set[AdminModule]] = {role: set() for role in UserRole}

        for raw_role, raw_values in role_permissions.items():
            if not UserRole.is_valid(raw_role):
                problems.append(f"role_permissions: unknown role '{raw_role}'")
                continue
            for raw in raw_values:
                if Permission.is_valid(raw):
                    permissions[UserRole(raw_role)].add(Permission(raw))
                else:
                    problems.append(
                        f"role_permissions[{raw_role}]: unknown permission '{raw}'"
                    )

        for raw_role, raw_values in role_modules.items():
            if not UserRole.is_valid(raw_role):
                problems.append(f"role_modules: unknown role '{raw_role}'")
                continue
            for raw in raw_values:
                if AdminModule.is_valid(raw):
                    modules[UserRole(raw_role)].add(AdminModule(raw))
                else:
                    problems.append(f"role_modules[{raw_role}]: unknown module '{raw}'")

        if problems:
            raise ConfigurationError(problems)
        return cls(role_permissions=permissions, role_modules=modules)

    def find_problems(
        self,
        *,
        require_nested_roles: bool = True,
        require_module_coverage: bool = True,
    ) -> list[str]:
        """Collect structural problems without raising.

        Checks:
            - every role has an entry in both matrices
            - every entry holds catalog members only
            - (require_module_coverage) no role holds a permission inside a
              module it cannot enter; such grants are unreachable behind the
              module gate
            - (require_nested_roles) every role holds everything the roles
              ranked below it hold

        Args:
            require_nested_roles: Enforce the superset rule.
            require_module_coverage: Enforce permission/module consistency.

        Returns:
            list[str]: One line per problem; empty when valid.
        """
        problems: list[str] = []

        for role in UserRole:
            if role not in self.role_permissions:
                problems.append(f"role_permissions: no entry for role '{role.value}'")
            if role not in self.role_modules:
                problems.append(f"role_modules: no entry for role '{role.value}'")

        for role, granted in self.role_permissions.items():
            if not isinstance(role, UserRole):
                problems.append(f"role_permissions: unknown role {role!r}")
                continue
            for permission in granted:
                if not isinstance(permission, Permission):
                    problems.append(
                        f"role_permissions[{role.value}]: unknown permission {permission!r}"
                    )

        for role, reachable in self.role_modules.items():
            if not isinstance(role, UserRole):
                problems.append(f"role_modules: unknown role {role!r}")
                continue
            for module in reachable:
                if not isinstance(module, AdminModule):
                    problems.append(
                        f"role_modules[{role.value}]: unknown module {module!r}"
                    )

        if problems:
            # Further checks assume well-typed entries.
            return problems

        if require_module_coverage:
            for role in UserRole:
                reachable = self.modules_of(role)
                for permission in sorted(self.permissions_of(role)):
                    if permission.module not in reachable:
                        problems.append(
                            f"role '{role.value}' holds '{permission.value}' "
                            f"but cannot access module '{permission.module.value}'"
                        )

        if require_nested_roles:
            for role in sorted(UserRole, key=ROLE_RANK.__getitem__, reverse=True):
                for lower in roles_below(role):
                    missing_permissions = self.permissions_of(lower) - self.permissions_of(role)
                    for permission in sorted(missing_permissions):
                        problems.append(
                            f"role '{role.value}' lacks '{permission.value}' "
                            f"granted to lower role '{lower.value}'"
                        )
                    missing_modules = self.modules_of(lower) - self.modules_of(role)
                    for module in sorted(missing_modules):
                        problems.append(
                            f"role '{role.value}' lacks module '{module.value}' "
                            f"granted to lower role '{lower.value}'"
                        )

        return problems

    def validate(
        self,
        *,
        require_nested_roles: bool = True,
        require_module_coverage: bool = True,
    ) -> None:
        """Startup validation.

        Args:
            require_nested_roles: Enforce the superset rule.
            require_module_coverage: Enforce permission/module consistency.

        Raises:
            ConfigurationError: If find_problems() reports anything.
        """
        problems = self.find_problems(
            require_nested_roles=require_nested_roles,
            require_module_coverage=require_module_coverage,
        )
        if problems:
            raise ConfigurationError(problems)


def validate_catalog() -> None:
    """Check the enum catalogs against each other.

    Permission values must be unique (an Enum silently turns a duplicated
    value into an alias), and each must split into a known module and a
    known action.

    Raises:
        ConfigurationError: If the catalogs disagree.
    """
    problems: list[str] = []
    for catalog in (UserRole, AdminModule, Action, Permission):
        aliases = set(catalog.__members__) - {member.name for member in catalog}
        for alias in sorted(aliases):
            problems.append(
                f"{catalog.__name__}.{alias} duplicates value "
                f"'{catalog.__members__[alias].value}'"
            )

    for permission in Permission:
        namespace, dot, action = permission.value.partition(".")
        if not dot:
            problems.append(f"permission '{permission.value}' is not namespaced")
            continue
        if not AdminModule.is_valid(namespace):
            problems.append(
                f"permission '{permission.value}' names unknown module '{namespace}'"
            )
        if action not in Action.values():
            problems.append(
                f"permission '{permission.value}' names unknown action '{action}'"
            )

    if problems:
        raise ConfigurationError(problems)


# =============================================================================
# Compiled-in matrices
# =============================================================================

_MANAGER_PERMISSIONS: frozenset[Permission] = frozenset(
    {
        Permission.DASHBOARD_VIEW,
        Permission.MENU_VIEW,
        Permission.MENU_CREATE,
        Permission.MENU_EDIT,
        Permission.ORDERS_VIEW,
        Permission.ORDERS_CREATE,
        Permission.ORDERS_EDIT,
        Permission.ORDERS_CANCEL,
        Permission.RESERVATIONS_VIEW,
        Permission.RESERVATIONS_CREATE,
        Permission.RESERVATIONS_EDIT,
        Permission.RESERVATIONS_CANCEL,
        Permission.CUSTOMERS_VIEW,
        Permission.CUSTOMERS_CREATE,
        Permission.CUSTOMERS_EDIT,
        Permission.INVENTORY_VIEW,
        Permission.INVENTORY_CREATE,
        Permission.INVENTORY_EDIT,
        Permission.SCHEDULE_VIEW,
        Permission.SCHEDULE_CREATE,
        Permission.SCHEDULE_EDIT,
        Permission.USERS_VIEW,
        Permission.USERS_EDIT,
        Permission.REPORTS_VIEW,
        Permission.REPORTS_CREATE,
        Permission.ANALYTICS_VIEW,
        Permission.NOTIFICATIONS_VIEW,
        Permission.MAINTENANCE_VIEW,
        Permission.SUPPLIERS_VIEW,
        Permission.SUPPLIERS_EDIT,
        Permission.TABLES_VIEW,
        Permission.TABLES_EDIT,
        Permission.DELIVERY_VIEW,
        Permission.DELIVERY_MANAGE,
        Permission.EVENTS_VIEW,
        Permission.EVENTS_CREATE,
        Permission.EVENTS_EDIT,
        Permission.FEEDBACK_VIEW,
        Permission.FEEDBACK_RESPOND,
        Permission.QUALITY_VIEW,
        Permission.ACTIVITY_LOGS_VIEW,
    }
)

_EMPLOYEE_PERMISSIONS: frozenset[Permission] = frozenset(
    {
        Permission.DASHBOARD_VIEW,
        Permission.MENU_VIEW,
        Permission.ORDERS_VIEW,
        Permission.ORDERS_CREATE,
        Permission.ORDERS_EDIT,
        Permission.RESERVATIONS_VIEW,
        Permission.RESERVATIONS_CREATE,
        Permission.RESERVATIONS_EDIT,
        Permission.CUSTOMERS_VIEW,
        Permission.INVENTORY_VIEW,
        Permission.SCHEDULE_VIEW,
        Permission.NOTIFICATIONS_VIEW,
        Permission.TABLES_VIEW,
        Permission.TABLES_EDIT,
        Permission.DELIVERY_VIEW,
        Permission.FEEDBACK_VIEW,
    }
)

_MANAGER_MODULES: frozenset[AdminModule] = frozenset(
    {
        AdminModule.DASHBOARD,
        AdminModule.MENU,
        AdminModule.ORDERS,
        AdminModule.RESERVATIONS,
        AdminModule.CUSTOMERS,
        AdminModule.INVENTORY,
        AdminModule.SCHEDULE,
        AdminModule.USERS,
        AdminModule.REPORTS,
        AdminModule.ANALYTICS,
        AdminModule.NOTIFICATIONS,
        AdminModule.MAINTENANCE,
        AdminModule.SUPPLIERS,
        AdminModule.TABLES,
        AdminModule.DELIVERY,
        AdminModule.EVENTS,
        AdminModule.FEEDBACK,
        AdminModule.QUALITY,
        AdminModule.ACTIVITY_LOGS,
    }
)

_EMPLOYEE_MODULES: frozenset[AdminModule] = frozenset(
    {
        AdminModule.DASHBOARD,
        AdminModule.MENU,
        AdminModule.ORDERS,
        AdminModule.RESERVATIONS,
        AdminModule.CUSTOMERS,
        AdminModule.INVENTORY,
        AdminModule.SCHEDULE,
        AdminModule.NOTIFICATIONS,
        AdminModule.TABLES,
        AdminModule.DELIVERY,
        AdminModule.FEEDBACK,
    }
)

ROLE_PERMISSIONS: Mapping[UserRole, frozenset[Permission]] = MappingProxyType(
    {
        UserRole.DIRECTOR: frozenset(Permission),
        UserRole.MANAGER: _MANAGER_PERMISSIONS,
        UserRole.EMPLOYEE: _EMPLOYEE_PERMISSIONS,
    }
)

ROLE_MODULES: Mapping[UserRole, frozenset[AdminModule]] = MappingProxyType(
    {
        UserRole.DIRECTOR: frozenset(AdminModule),
        UserRole.MANAGER: _MANAGER_MODULES,
        UserRole.EMPLOYEE: _EMPLOYEE_MODULES,
    }
)

DEFAULT_MATRIX = AuthorizationMatrix(
    role_permissions=ROLE_PERMISSIONS,
    role_modules=ROLE_MODULES,
)
