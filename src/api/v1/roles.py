# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role and permission catalog API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import get_catalog, get_current_user
from src.rbac.catalog import RoleCatalog
from src.rbac.errors import UnknownRoleError
from src.rbac.permissions import Permission, PermissionArea, permissions_in_area
from src.rbac.roles import Role
from src.schemas.rbac import (
    PermissionGroupSchema,
    RoleSchema,
    RoleWithPermissionsSchema,
)
from src.schemas.user import TeamMember
from src.services import project_scope_service

router = APIRouter()


def build_role_schema(catalog: RoleCatalog, role: Role | str) -> RoleSchema:
    """Combine a role's display metadata with its project access type."""
    info = catalog.role_info(role)
    return RoleSchema(
        role=info.role,
        label=info.label,
        description=info.description,
        color=info.color,
        icon=info.icon,
        project_access=project_scope_service.access_type(catalog, role),
    )


@router.get("/roles", response_model=list[RoleSchema], summary="List all roles")
def list_roles(
    catalog: RoleCatalog = Depends(get_catalog),
    current_user: TeamMember = Depends(get_current_user),
) -> list[RoleSchema]:
    """Retrieve every role in presentation order."""
    return [build_role_schema(catalog, info.role) for info in catalog.all_roles()]


@router.get(
    "/roles/{role}",
    response_model=RoleWithPermissionsSchema,
    summary="Get a role with its permissions",
)
def get_role(
    role: str,
    catalog: RoleCatalog = Depends(get_catalog),
    current_user: TeamMember = Depends(get_current_user),
) -> RoleWithPermissionsSchema:
    """Retrieve a role by its tag, including its permissions in catalog order."""
    try:
        base = build_role_schema(catalog, role)
    except UnknownRoleError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Role not found"
        ) from None

    granted = catalog.permissions_of(role)
    return RoleWithPermissionsSchema(
        **base.model_dump(),
        permissions=[p for p in Permission if p in granted],
    )


@router.get(
    "/permissions",
    response_model=list[PermissionGroupSchema],
    summary="List all permissions by feature area",
)
def list_permissions(
    current_user: TeamMember = Depends(get_current_user),
) -> list[PermissionGroupSchema]:
    """Retrieve the permission catalog grouped by feature area."""
    return [
        PermissionGroupSchema(area=area, permissions=permissions_in_area(area))
        for area in PermissionArea
    ]
