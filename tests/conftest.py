# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_DEMO_USERS"] = "false"
os.environ.pop("ROLE_CATALOG_PATH", None)

from src.api.deps import get_db
from src.main import app
from src.models import Base
from src.rbac.catalog import get_default_catalog
from src.services.user_directory import UserDirectory
from src.services.user_store import seed_demo_users

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

FIXED_NOW = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    """The time every test directory reports as now."""
    return FIXED_NOW


@pytest.fixture
def catalog():
    """The built-in role catalog."""
    return get_default_catalog()


@pytest.fixture
def directory() -> UserDirectory:
    """An empty directory with a fixed clock."""
    return UserDirectory(clock=lambda: FIXED_NOW)


@pytest.fixture
def team(directory) -> UserDirectory:
    """A directory holding the demo team."""
    seed_demo_users(directory)
    return directory


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session, catalog, team):
    """Create a test client with database override and the demo team."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        app.state.catalog = catalog
        app.state.directory = team
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login_as(client):
    """Return a helper that makes the client act as a team member."""

    def _login(user_id: int) -> TestClient:
        response = client.post("/api/v1/session/switch", json={"userId": user_id})
        assert response.status_code == 200, response.text
        return client

    return _login


@pytest.fixture
def owner_client(login_as):
    """Client acting as the owner (demo user 1)."""
    return login_as(1)


@pytest.fixture
def foreman_client(login_as):
    """Client acting as the foreman (demo user 3, projects 1 and 2)."""
    return login_as(3)
