# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for project visibility endpoints."""


class TestAccessibleProjects:
    """Tests for GET /api/v1/projects/accessible."""

    def test_foreman_sees_assigned_projects(self, foreman_client):
        """Test that a foreman only gets back the projects they are assigned to."""
        response = foreman_client.get(
            "/api/v1/projects/accessible", params={"project_id": [3, 2, 1]}
        )

        assert response.status_code == 200
        assert response.json() == {"accessType": "assigned", "projectIds": [2, 1]}

    def test_owner_sees_everything(self, owner_client):
        """Test that the owner gets every requested project back."""
        response = owner_client.get(
            "/api/v1/projects/accessible", params={"project_id": [7, 3]}
        )
        assert response.json()["projectIds"] == [7, 3]

    def test_no_ids(self, owner_client):
        """Test that no requested ids gives an empty result."""
        response = owner_client.get("/api/v1/projects/accessible")
        assert response.json()["projectIds"] == []

    def test_requires_session(self, client):
        """Test that the endpoint requires a session."""
        assert client.get("/api/v1/projects/accessible").status_code == 401


class TestProjectAccess:
    """Tests for GET /api/v1/projects/{id}/access."""

    def test_foreman_assigned_project(self, foreman_client):
        """Test that a foreman may see an assigned project."""
        response = foreman_client.get("/api/v1/projects/1/access")
        assert response.json() == {"projectId": 1, "allowed": True}

    def test_foreman_other_project(self, foreman_client):
        """Test that a foreman may not see an unassigned project."""
        response = foreman_client.get("/api/v1/projects/3/access")
        assert response.json() == {"projectId": 3, "allowed": False}

    def test_subcontractor(self, login_as):
        """Test that a subcontractor sees only their assigned project."""
        client = login_as(6)
        assert client.get("/api/v1/projects/2/access").json()["allowed"] is True
        assert client.get("/api/v1/projects/1/access").json()["allowed"] is False
