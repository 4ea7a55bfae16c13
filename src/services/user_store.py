# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Persistence of the user directory and the demo team seed."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.models import TeamMemberModel
from src.rbac.roles import Role
from src.schemas.user import TeamMember, UserCreate
from src.services.user_directory import Persist, UserDirectory

logger = logging.getLogger(__name__)

# Demo team of a typical flooring company, one member per role
DEMO_USERS: list[dict] = [
    {
        "name": "Derek Morrison",
        "email": "derek@floorops.com",
        "phone": "(555) 100-0001",
        "role": Role.OWNER,
    },
    {
        "name": "Sarah Chen",
        "email": "sarah@floorops.com",
        "phone": "(555) 100-0002",
        "role": Role.PROJECT_MANAGER,
        "assigned_project_ids": [1, 2, 3],
        "assigned_crew_ids": ["crew-a", "crew-b"],
    },
    {
        "name": "Mike Rodriguez",
        "email": "mike@floorops.com",
        "phone": "(555) 100-0003",
        "role": Role.FOREMAN,
        "assigned_project_ids": [1, 2],
        "assigned_crew_ids": ["crew-a"],
    },
    {
        "name": "James Wilson",
        "email": "james@floorops.com",
        "phone": "(555) 100-0004",
        "role": Role.INSTALLER,
        "assigned_project_ids": [1],
        "assigned_crew_ids": ["crew-a"],
    },
    {
        "name": "Emily Parker",
        "email": "emily@floorops.com",
        "phone": "(555) 100-0005",
        "role": Role.OFFICE_ADMIN,
    },
    {
        "name": "Tony Martinez",
        "email": "tony@precision-tile.com",
        "phone": "(555) 200-0001",
        "role": Role.SUBCONTRACTOR,
        "assigned_project_ids": [2],
    },
]


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo; stored times are always UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_member(row: TeamMemberModel) -> TeamMember:
    member = TeamMember(
        id=row.id,
        name=row.name,
        email=row.email,
        phone=row.phone,
        role=row.role,
        assigned_project_ids=row.assigned_project_ids or [],
        assigned_crew_ids=row.assigned_crew_ids or [],
        active=row.active,
        created_at=_as_utc(row.created_at),
        last_login_at=_as_utc(row.last_login_at),
    )
    if not member.has_known_role:
        logger.warning(
            f"User {row.id} has unrecognized role {row.role!r}; access will be denied"
        )
    return member


def load_directory(
    db: Session, clock: Callable[[], datetime] | None = None
) -> UserDirectory:
    """Build a user directory from all stored team members.

    Args:
        db: Database session
        clock: Optional time source for the directory

    Returns:
        Directory holding the stored members in id order
    """
    rows = db.query(TeamMemberModel).order_by(TeamMemberModel.id).all()
    members = [_to_member(row) for row in rows]
    if clock is None:
        directory = UserDirectory.from_records(members)
    else:
        directory = UserDirectory.from_records(members, clock=clock)
    logger.info(f"Loaded {len(directory)} team members")
    return directory


def save_user(db: Session, member: TeamMember) -> TeamMemberModel:
    """Insert or update one team member.

    Usable as the `persist` callback of `UserDirectory` writes. The session is
    rolled back when the write fails.
    """
    role = member.role.value if isinstance(member.role, Role) else member.role
    try:
        row = db.merge(
            TeamMemberModel(
                id=member.id,
                name=member.name,
                email=member.email,
                phone=member.phone,
                role=role,
                assigned_project_ids=list(member.assigned_project_ids),
                assigned_crew_ids=list(member.assigned_crew_ids),
                active=member.active,
                created_at=member.created_at,
                last_login_at=member.last_login_at,
            )
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to save user {member.id}")
        raise
    return row


def save_directory(db: Session, directory: UserDirectory) -> int:
    """Insert or update every member of the directory.

    Returns:
        Number of members written
    """
    count = 0
    for member in directory.list_users():
        save_user(db, member)
        count += 1
    return count


def seed_demo_users(
    directory: UserDirectory, persist: Persist | None = None
) -> list[TeamMember]:
    """Add the demo team to an empty directory. Does nothing otherwise."""
    if len(directory):
        return []
    added = [
        directory.add_user(UserCreate(**data), persist=persist) for data in DEMO_USERS
    ]
    logger.info(f"Seeded {len(added)} demo team members")
    return added
