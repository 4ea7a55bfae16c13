# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team member schemas.

Field aliases are camelCase so records serialize to the storage shape used by
the dashboard (``assignedProjectIds``, ``createdAt`` ...).
"""
import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from src.rbac.roles import Role


def _dedupe(values):
    return tuple(dict.fromkeys(values))


class TeamMember(BaseModel):
    """A team member record as owned by the user directory.

    Records are immutable; the directory replaces them on update. ``role`` is
    normally a ``Role`` but keeps the raw tag when a stored value does not
    match any role, so that evaluators can deny it instead of failing to load.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    role: Annotated[Role | str, Field(union_mode="left_to_right")]
    assigned_project_ids: tuple[int, ...] = ()
    assigned_crew_ids: tuple[str, ...] = ()
    active: bool = True
    created_at: datetime.datetime
    last_login_at: Optional[datetime.datetime] = None

    @field_validator("assigned_project_ids", "assigned_crew_ids")
    @classmethod
    def dedupe_assignments(cls, v: tuple) -> tuple:
        return _dedupe(v)

    @property
    def has_known_role(self) -> bool:
        return isinstance(self.role, Role)


class UserCreate(BaseModel):
    """Schema for adding a team member."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    email: EmailStr
    phone: Optional[str] = None
    role: Role
    assigned_project_ids: list[int] = Field(default_factory=list)
    assigned_crew_ids: list[str] = Field(default_factory=list)
    active: bool = True


class UserUpdate(BaseModel):
    """Schema for updating a team member. Only fields that are set are applied."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    role: Optional[Role] = None
    assigned_project_ids: Optional[list[int]] = None
    assigned_crew_ids: Optional[list[str]] = None
    active: Optional[bool] = None


class SessionSwitchRequest(BaseModel):
    """Request to act as another team member (role switcher)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: int
