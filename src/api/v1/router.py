# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from src.api.v1 import projects, roles, session, team

api_router = APIRouter()

# Session (role switcher) routes
api_router.include_router(session.router, prefix="/session", tags=["session"])

# Role and permission catalog routes
api_router.include_router(roles.router, tags=["rbac"])

# Team management routes
api_router.include_router(team.router, prefix="/team", tags=["team"])

# Project visibility routes
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
