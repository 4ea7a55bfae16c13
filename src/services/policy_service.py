# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission checks against the role catalog.

Every function is pure: the answer depends only on the catalog and the
arguments. Role and permission values that do not match the catalog (for
example tags read back from storage) are denied rather than raised.
"""

import logging
from collections.abc import Iterable

from src.rbac.catalog import RoleCatalog
from src.rbac.errors import UnknownPermissionError, UnknownRoleError
from src.rbac.permissions import Permission, parse_permission
from src.rbac.roles import Role
from src.schemas.user import TeamMember

logger = logging.getLogger(__name__)

PUNCH_LIST_EDIT_PERMISSIONS = (
    Permission.CREATE_PUNCH_ITEM,
    Permission.EDIT_PUNCH_ITEM,
    Permission.COMPLETE_PUNCH_ITEM,
)


def granted_permissions(catalog: RoleCatalog, role: Role | str) -> frozenset[Permission]:
    """Get the permissions of a role, or an empty set for an unknown role."""
    try:
        return catalog.permissions_of(role)
    except UnknownRoleError:
        logger.warning(f"Denying access for unrecognized role {role!r}")
        return frozenset()


def can(catalog: RoleCatalog, role: Role | str, permission: Permission | str) -> bool:
    """Check if a role has a specific permission."""
    granted = granted_permissions(catalog, role)
    if not granted:
        return False
    try:
        return parse_permission(permission) in granted
    except UnknownPermissionError:
        logger.warning(f"Denying unrecognized permission {permission!r}")
        return False


def can_all(
    catalog: RoleCatalog, role: Role | str, permissions: Iterable[Permission | str]
) -> bool:
    """Check if a role has every one of the permissions. True for none."""
    return all(can(catalog, role, p) for p in permissions)


def can_any(
    catalog: RoleCatalog, role: Role | str, permissions: Iterable[Permission | str]
) -> bool:
    """Check if a role has at least one of the permissions. False for none."""
    return any(can(catalog, role, p) for p in permissions)


def can_view_pricing(catalog: RoleCatalog, role: Role | str) -> bool:
    """Check if a role may see pricing and other financial figures."""
    return can(catalog, role, Permission.VIEW_PRICING)


def can_edit_punch_list(catalog: RoleCatalog, role: Role | str) -> bool:
    """Check if a role may modify punch list items in any way."""
    return can_any(catalog, role, PUNCH_LIST_EDIT_PERMISSIONS)


def can_manage_team(catalog: RoleCatalog, role: Role | str) -> bool:
    """Check if a role may add, edit and deactivate team members."""
    return can(catalog, role, Permission.MANAGE_USERS)


def user_can(
    catalog: RoleCatalog, user: TeamMember, permission: Permission | str
) -> bool:
    """Check a permission for a team member's current role.

    Inactive members hold no capability.
    """
    if not user.active:
        return False
    return can(catalog, user.role, permission)
