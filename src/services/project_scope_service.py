# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Project visibility rules.

This module is the only place that decides which projects a team member may
see. Callers filter project lists through it instead of checking role names.
"""

from collections.abc import Iterable
from enum import Enum

from src.rbac.catalog import RoleCatalog
from src.rbac.permissions import Permission
from src.rbac.roles import Role
from src.schemas.user import TeamMember
from src.services.policy_service import granted_permissions


class ProjectAccessType(str, Enum):
    """Which projects a role can see."""

    ALL = "all"
    ASSIGNED = "assigned"
    NONE = "none"


def access_type(catalog: RoleCatalog, role: Role | str) -> ProjectAccessType:
    """Derive the project access type of a role from its permissions."""
    granted = granted_permissions(catalog, role)
    if Permission.VIEW_ALL_PROJECTS in granted:
        return ProjectAccessType.ALL
    if Permission.VIEW_ASSIGNED_PROJECTS in granted:
        return ProjectAccessType.ASSIGNED
    return ProjectAccessType.NONE


def can_access_project(catalog: RoleCatalog, user: TeamMember, project_id: int) -> bool:
    """Check if a team member may see a project.

    Args:
        catalog: Role catalog
        user: Team member, as currently stored in the directory
        project_id: Project identifier

    Returns:
        True for roles that see all projects, membership in the member's
        assigned projects for assigned-only roles, False otherwise
    """
    scope = access_type(catalog, user.role)
    if scope is ProjectAccessType.ALL:
        return True
    if scope is ProjectAccessType.ASSIGNED:
        return project_id in user.assigned_project_ids
    return False


def accessible_project_ids(
    catalog: RoleCatalog, user: TeamMember, all_project_ids: Iterable[int]
) -> list[int]:
    """Filter project ids down to those the member may see, keeping input order."""
    return [pid for pid in all_project_ids if can_access_project(catalog, user, pid)]
