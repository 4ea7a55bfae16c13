# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import configure_logging, settings
from src.database import SessionLocal, engine
from src.models import Base
from src.rbac.catalog import load_configured_catalog
from src.services import user_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    configure_logging(settings)

    # A malformed catalog raises here and the application does not start
    app.state.catalog = load_configured_catalog(settings.role_catalog_path)

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        directory = user_store.load_directory(db)
        if settings.seed_demo_users:
            user_store.seed_demo_users(
                directory, persist=partial(user_store.save_user, db)
            )
        app.state.directory = directory
    finally:
        db.close()

    logger.info(f"Started with {len(app.state.directory)} team members")

    yield

    logger.info("Shutting down...")

app = FastAPI(
    title="FloorOps Access Control",
    description="Role-based access control for the FloorOps operations dashboard",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


from src.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
