# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Project visibility API endpoints."""

from fastapi import APIRouter, Depends, Query

from src.api.deps import get_catalog, get_current_user
from src.rbac.catalog import RoleCatalog
from src.schemas.rbac import AccessibleProjectsSchema, ProjectAccessSchema
from src.schemas.user import TeamMember
from src.services import project_scope_service

router = APIRouter()


@router.get(
    "/accessible",
    response_model=AccessibleProjectsSchema,
    summary="Filter project ids to those visible to the acting member",
)
def accessible_projects(
    project_id: list[int] = Query(default=[]),
    catalog: RoleCatalog = Depends(get_catalog),
    current_user: TeamMember = Depends(get_current_user),
) -> AccessibleProjectsSchema:
    """Return the subset of `project_id` values the acting member may see."""
    return AccessibleProjectsSchema(
        access_type=project_scope_service.access_type(catalog, current_user.role),
        project_ids=project_scope_service.accessible_project_ids(
            catalog, current_user, project_id
        ),
    )


@router.get(
    "/{project_id}/access",
    response_model=ProjectAccessSchema,
    summary="Check access to a project",
)
def project_access(
    project_id: int,
    catalog: RoleCatalog = Depends(get_catalog),
    current_user: TeamMember = Depends(get_current_user),
) -> ProjectAccessSchema:
    """Check whether the acting member may see a project."""
    return ProjectAccessSchema(
        project_id=project_id,
        allowed=project_scope_service.can_access_project(
            catalog, current_user, project_id
        ),
    )
