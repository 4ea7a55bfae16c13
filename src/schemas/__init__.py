# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""

from src.schemas.user import SessionSwitchRequest, TeamMember, UserCreate, UserUpdate

__all__ = [
    "SessionSwitchRequest",
    "TeamMember",
    "UserCreate",
    "UserUpdate",
]
