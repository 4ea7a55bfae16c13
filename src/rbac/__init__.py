# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role and permission catalogs."""

from src.rbac.catalog import (
    RoleCatalog,
    get_default_catalog,
    load_configured_catalog,
    load_role_catalog_file,
)
from src.rbac.errors import (
    AccessControlError,
    CatalogError,
    UnknownPermissionError,
    UnknownRoleError,
)
from src.rbac.permissions import (
    PERMISSION_AREAS,
    Permission,
    PermissionArea,
    parse_permission,
    permissions_in_area,
)
from src.rbac.roles import ROLE_DEFINITIONS, ROLE_ORDER, Role, RoleDefinition, parse_role

__all__ = [
    "PERMISSION_AREAS",
    "ROLE_DEFINITIONS",
    "ROLE_ORDER",
    "AccessControlError",
    "CatalogError",
    "Permission",
    "PermissionArea",
    "Role",
    "RoleCatalog",
    "RoleDefinition",
    "UnknownPermissionError",
    "UnknownRoleError",
    "get_default_catalog",
    "load_configured_catalog",
    "load_role_catalog_file",
    "parse_permission",
    "parse_role",
    "permissions_in_area",
]
