# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role, permission and access schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.rbac.permissions import Permission, PermissionArea
from src.rbac.roles import Role
from src.schemas.user import TeamMember
from src.services.project_scope_service import ProjectAccessType


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RoleSchema(_CamelModel):
    """Schema representing a role and its display metadata."""

    role: Role
    label: str
    description: str
    color: str
    icon: str
    project_access: ProjectAccessType


class RoleWithPermissionsSchema(RoleSchema):
    """Schema representing a role along with its permissions."""

    permissions: list[Permission]


class PermissionGroupSchema(_CamelModel):
    """Permissions of one feature area."""

    area: PermissionArea
    permissions: list[Permission]


class SessionSchema(_CamelModel):
    """The acting team member and what they may do."""

    user: TeamMember
    role: RoleSchema | None
    permissions: list[Permission]
    project_access: ProjectAccessType


class ProjectAccessSchema(_CamelModel):
    """Whether the acting member may see a project."""

    project_id: int
    allowed: bool


class AccessibleProjectsSchema(_CamelModel):
    """Project ids the acting member may see, in request order."""

    access_type: ProjectAccessType
    project_ids: list[int]
