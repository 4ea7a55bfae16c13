# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""In-memory directory of team members.

The directory is the only owner of team member records. Writes are serialized
by a lock; records are kept in a dict that is replaced as a whole on every
write, so readers never need the lock and always see committed records.

Every write accepts an optional `persist` callback. It runs under the lock with
the new record before the record becomes visible; if it raises, the directory
is left unchanged. Storage therefore receives writes in the same order as the
directory applies them.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any

from src.schemas.user import TeamMember, UserCreate, UserUpdate

logger = logging.getLogger(__name__)

Persist = Callable[[TeamMember], Any]

_NON_NULLABLE_FIELDS = (
    "name",
    "email",
    "role",
    "assigned_project_ids",
    "assigned_crew_ids",
    "active",
)


class UserDirectoryError(Exception):
    """Base exception for user directory errors."""


class UserValidationError(UserDirectoryError):
    """A required team member field is missing or blank."""


class DuplicateEmailError(UserDirectoryError):
    """Another team member already uses this email address."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already in use: {email}")
        self.email = email


class DuplicateUserError(UserDirectoryError):
    """Two records share the same id."""


class UserNotFoundError(UserDirectoryError):
    """No team member has the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _email_key(email: str) -> str:
    return email.strip().casefold()


def _require_text(field: str, value: str | None) -> str:
    if value is None or not value.strip():
        raise UserValidationError(f"{field} is required")
    return value.strip()


class UserDirectory:
    """Thread-safe store of team members, in insertion order."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._users: dict[int, TeamMember] = {}
        self._next_id = 1

    @classmethod
    def from_records(
        cls,
        records: Iterable[TeamMember],
        clock: Callable[[], datetime] = _utcnow,
    ) -> "UserDirectory":
        """Build a directory from persisted records, keeping their ids.

        Raises:
            DuplicateUserError: two records share an id
            DuplicateEmailError: two records share an email
        """
        directory = cls(clock=clock)
        users: dict[int, TeamMember] = {}
        emails: set[str] = set()
        for record in records:
            if record.id in users:
                raise DuplicateUserError(f"Duplicate user id: {record.id}")
            key = _email_key(record.email)
            if key in emails:
                raise DuplicateEmailError(record.email)
            emails.add(key)
            users[record.id] = record
        directory._users = users
        directory._next_id = max(users, default=0) + 1
        return directory

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> list[TeamMember]:
        """Get all team members in insertion order."""
        return list(self._users.values())

    def get_user(self, user_id: int) -> TeamMember:
        """Get a team member by id.

        Raises:
            UserNotFoundError: if the id is unknown
        """
        try:
            return self._users[user_id]
        except KeyError:
            raise UserNotFoundError(user_id) from None

    def add_user(self, data: UserCreate, persist: Persist | None = None) -> TeamMember:
        """Add a team member.

        Args:
            data: New member fields; name and email must not be blank
            persist: Optional callback that stores the new record

        Returns:
            The stored record with its assigned id and creation time

        Raises:
            UserValidationError: name or email is blank
            DuplicateEmailError: the email is already used (case-insensitive)
        """
        name = _require_text("name", data.name)
        email = _require_text("email", data.email)

        with self._lock:
            self._check_email_free(email)
            user = TeamMember(
                id=self._next_id,
                name=name,
                email=email,
                phone=data.phone,
                role=data.role,
                assigned_project_ids=data.assigned_project_ids,
                assigned_crew_ids=data.assigned_crew_ids,
                active=data.active,
                created_at=self._clock(),
            )
            self._commit(user, persist)
            self._next_id += 1

        logger.info(f"Added user {user.id} ({user.email}) as {data.role.value}")
        return user

    def update_user(
        self, user_id: int, data: UserUpdate, persist: Persist | None = None
    ) -> TeamMember:
        """Apply the fields set on `data` to a team member.

        Raises:
            UserNotFoundError: if the id is unknown
            UserValidationError: a required field is set to blank or null
            DuplicateEmailError: the new email belongs to another member
        """
        changes = data.model_dump(exclude_unset=True)
        for field in _NON_NULLABLE_FIELDS:
            if field in changes and changes[field] is None:
                raise UserValidationError(f"{field} cannot be null")
        if "name" in changes:
            changes["name"] = _require_text("name", changes["name"])
        if "email" in changes:
            changes["email"] = _require_text("email", changes["email"])

        with self._lock:
            current = self.get_user(user_id)
            if "email" in changes:
                self._check_email_free(changes["email"], exclude_id=user_id)
            user = self._replace(current, changes, persist)

        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return user

    def deactivate(self, user_id: int, persist: Persist | None = None) -> TeamMember:
        """Mark a team member inactive. Role and assignments are kept."""
        with self._lock:
            user = self._replace(self.get_user(user_id), {"active": False}, persist)
        logger.info(f"Deactivated user {user_id}")
        return user

    def activate(self, user_id: int, persist: Persist | None = None) -> TeamMember:
        """Reactivate a previously deactivated team member."""
        with self._lock:
            user = self._replace(self.get_user(user_id), {"active": True}, persist)
        logger.info(f"Activated user {user_id}")
        return user

    def record_login(self, user_id: int, persist: Persist | None = None) -> TeamMember:
        """Stamp the member's last login time."""
        with self._lock:
            return self._replace(
                self.get_user(user_id), {"last_login_at": self._clock()}, persist
            )

    def _check_email_free(self, email: str, exclude_id: int | None = None) -> None:
        key = _email_key(email)
        for user in self._users.values():
            if user.id != exclude_id and _email_key(user.email) == key:
                raise DuplicateEmailError(email)

    def _replace(
        self,
        current: TeamMember,
        changes: dict[str, Any],
        persist: Persist | None,
    ) -> TeamMember:
        # Re-validate so assignment lists are normalized like on creation
        user = TeamMember.model_validate({**current.model_dump(), **changes})
        self._commit(user, persist)
        return user

    def _commit(self, user: TeamMember, persist: Persist | None = None) -> None:
        if persist is not None:
            persist(user)
        users = dict(self._users)
        users[user.id] = user
        self._users = users
