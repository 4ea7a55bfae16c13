# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team management API endpoints."""

from functools import partial

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import (
    get_catalog,
    get_current_user,
    get_db,
    get_directory,
    require_permission,
)
from src.rbac.catalog import RoleCatalog
from src.rbac.permissions import Permission
from src.schemas.user import TeamMember, UserCreate, UserUpdate
from src.services import policy_service, user_store
from src.services.user_directory import (
    DuplicateEmailError,
    UserDirectory,
    UserDirectoryError,
    UserNotFoundError,
    UserValidationError,
)

ASSIGNMENT_FIELDS = {"assigned_project_ids", "assigned_crew_ids"}

router = APIRouter()


def _http_error(error: UserDirectoryError) -> HTTPException:
    if isinstance(error, UserNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, DuplicateEmailError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, UserValidationError):
        return HTTPException(status_code=422, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.get("", response_model=list[TeamMember], summary="List team members")
def list_team(
    directory: UserDirectory = Depends(get_directory),
    current_user: TeamMember = Depends(require_permission(Permission.VIEW_TEAM)),
) -> list[TeamMember]:
    """Retrieve all team members in the order they were added.

    Requires VIEW_TEAM permission.
    """
    return directory.list_users()


@router.post(
    "",
    response_model=TeamMember,
    status_code=status.HTTP_201_CREATED,
    summary="Add a team member",
)
def create_member(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    directory: UserDirectory = Depends(get_directory),
    current_user: TeamMember = Depends(require_permission(Permission.MANAGE_USERS)),
) -> TeamMember:
    """Add a team member.

    Requires MANAGE_USERS permission.
    """
    try:
        return directory.add_user(user_in, persist=partial(user_store.save_user, db))
    except UserDirectoryError as e:
        raise _http_error(e) from e


@router.get("/{user_id}", response_model=TeamMember, summary="Get a team member")
def get_member(
    user_id: int,
    directory: UserDirectory = Depends(get_directory),
    current_user: TeamMember = Depends(require_permission(Permission.VIEW_TEAM)),
) -> TeamMember:
    """Retrieve a team member by id.

    Requires VIEW_TEAM permission.
    """
    try:
        return directory.get_user(user_id)
    except UserDirectoryError as e:
        raise _http_error(e) from e


@router.patch("/{user_id}", response_model=TeamMember, summary="Update a team member")
def update_member(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    catalog: RoleCatalog = Depends(get_catalog),
    directory: UserDirectory = Depends(get_directory),
    current_user: TeamMember = Depends(get_current_user),
) -> TeamMember:
    """Update contact details, role or assignments of a team member.

    Requires MANAGE_USERS permission. ASSIGN_USERS is enough when only the
    project and crew assignments change.
    """
    allowed = [Permission.MANAGE_USERS]
    if user_in.model_fields_set <= ASSIGNMENT_FIELDS:
        allowed.append(Permission.ASSIGN_USERS)
    if not current_user.active or not policy_service.can_any(
        catalog, current_user.role, allowed
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission denied: {Permission.MANAGE_USERS.value}",
        )

    try:
        return directory.update_user(
            user_id, user_in, persist=partial(user_store.save_user, db)
        )
    except UserDirectoryError as e:
        raise _http_error(e) from e


@router.post(
    "/{user_id}/deactivate",
    response_model=TeamMember,
    summary="Deactivate a team member",
)
def deactivate_member(
    user_id: int,
    db: Session = Depends(get_db),
    directory: UserDirectory = Depends(get_directory),
    current_user: TeamMember = Depends(require_permission(Permission.MANAGE_USERS)),
) -> TeamMember:
    """Deactivate a team member. Role and assignments are kept.

    Requires MANAGE_USERS permission.
    """
    try:
        return directory.deactivate(user_id, persist=partial(user_store.save_user, db))
    except UserDirectoryError as e:
        raise _http_error(e) from e


@router.post(
    "/{user_id}/activate",
    response_model=TeamMember,
    summary="Reactivate a team member",
)
def activate_member(
    user_id: int,
    db: Session = Depends(get_db),
    directory: UserDirectory = Depends(get_directory),
    current_user: TeamMember = Depends(require_permission(Permission.MANAGE_USERS)),
) -> TeamMember:
    """Reactivate a deactivated team member.

    Requires MANAGE_USERS permission.
    """
    try:
        return directory.activate(user_id, persist=partial(user_store.save_user, db))
    except UserDirectoryError as e:
        raise _http_error(e) from e
