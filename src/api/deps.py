# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from collections.abc import Generator

from fastapi import Cookie, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from src.database import SessionLocal
from src.rbac.catalog import RoleCatalog
from src.rbac.permissions import Permission
from src.schemas.user import TeamMember
from src.services import policy_service
from src.services.user_directory import UserDirectory, UserNotFoundError

SESSION_COOKIE = "session"


def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_catalog(request: Request) -> RoleCatalog:
    """Get the role catalog loaded at startup."""
    return request.app.state.catalog


def get_directory(request: Request) -> UserDirectory:
    """Get the user directory loaded at startup."""
    return request.app.state.directory


def get_current_user(
    directory: UserDirectory = Depends(get_directory),
    session: str | None = Cookie(default=None),
) -> TeamMember:
    """Get the acting team member from the session cookie."""
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        user = directory.get_user(int(session))
    except (ValueError, UserNotFoundError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session",
        ) from None

    if not user.active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User is inactive",
        )

    return user


def require_permission(permission: Permission):
    """Dependency for permission-based authorization."""

    def dependency(
        catalog: RoleCatalog = Depends(get_catalog),
        current_user: TeamMember = Depends(get_current_user),
    ) -> TeamMember:
        if not policy_service.user_can(catalog, current_user, permission):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {permission.value}",
            )
        return current_user

    return dependency
