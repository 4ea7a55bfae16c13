# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session API endpoints for acting as a team member (role switcher)."""

import logging
from functools import partial

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from src.api.deps import (
    SESSION_COOKIE,
    get_catalog,
    get_current_user,
    get_db,
    get_directory,
)
from src.api.v1.roles import build_role_schema
from src.rbac.catalog import RoleCatalog
from src.schemas.rbac import SessionSchema
from src.schemas.user import SessionSwitchRequest, TeamMember
from src.services import policy_service, project_scope_service, user_store
from src.services.user_directory import UserDirectory, UserNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


def build_session_schema(catalog: RoleCatalog, user: TeamMember) -> SessionSchema:
    """Describe what a team member may do."""
    return SessionSchema(
        user=user,
        role=build_role_schema(catalog, user.role) if user.has_known_role else None,
        permissions=sorted(
            policy_service.granted_permissions(catalog, user.role),
            key=lambda p: p.value,
        ),
        project_access=project_scope_service.access_type(catalog, user.role),
    )


@router.post("/switch", response_model=SessionSchema, summary="Act as a team member")
def switch_user(
    request_in: SessionSwitchRequest,
    response: Response,
    db: Session = Depends(get_db),
    catalog: RoleCatalog = Depends(get_catalog),
    directory: UserDirectory = Depends(get_directory),
) -> SessionSchema:
    """Start acting as another team member and stamp their last login.

    Inactive members cannot be selected.
    """
    try:
        user = directory.get_user(request_in.user_id)
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        ) from None

    if not user.active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="User is inactive"
        )

    user = directory.record_login(user.id, persist=partial(user_store.save_user, db))
    response.set_cookie(key=SESSION_COOKIE, value=str(user.id), httponly=True, samesite="lax")
    logger.info(f"Session switched to user {user.id}")
    return build_session_schema(catalog, user)


@router.get("/me", response_model=SessionSchema, summary="Get the acting team member")
def get_session(
    catalog: RoleCatalog = Depends(get_catalog),
    current_user: TeamMember = Depends(get_current_user),
) -> SessionSchema:
    """Retrieve the acting member with their permissions and project access."""
    return build_session_schema(catalog, current_user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, summary="End the session")
def logout(response: Response) -> None:
    """Clear the session cookie."""
    response.delete_cookie(key=SESSION_COOKIE)
