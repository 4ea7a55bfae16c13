# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for policy_service."""

import logging

import pytest

from src.rbac.permissions import Permission
from src.rbac.roles import Role
from src.schemas.user import TeamMember, UserCreate, UserUpdate
from src.services import policy_service


class TestCan:
    """Tests for single-permission checks."""

    @pytest.mark.parametrize("role", list(Role))
    def test_can_matches_permission_set(self, catalog, role):
        """Test that can() agrees with the catalog for every role and permission."""
        granted = catalog.permissions_of(role)
        for permission in Permission:
            assert policy_service.can(catalog, role, permission) == (
                permission in granted
            )

    def test_owner_can_view_pricing(self, catalog):
        """Test that the owner can view pricing."""
        assert policy_service.can(catalog, Role.OWNER, Permission.VIEW_PRICING) is True

    def test_installer_cannot_view_pricing(self, catalog):
        """Test that an installer cannot view pricing."""
        assert policy_service.can(catalog, Role.INSTALLER, Permission.VIEW_PRICING) is False

    def test_can_accepts_tags(self, catalog):
        """Test that roles and permissions may be given as tags."""
        assert policy_service.can(catalog, "foreman", "CREATE_DAILY_LOG") is True
        assert policy_service.can(catalog, "sub", "CREATE_DAILY_LOG") is False

    def test_unknown_role_is_denied(self, catalog, caplog):
        """Test that an unrecognized role string denies instead of raising."""
        with caplog.at_level(logging.WARNING):
            result = policy_service.can(catalog, "project_manager", Permission.VIEW_TEAM)
        assert result is False
        assert "project_manager" in caplog.text

    def test_unknown_permission_is_denied(self, catalog, caplog):
        """Test that an unknown permission is denied and logged."""
        with caplog.at_level(logging.WARNING):
            result = policy_service.can(catalog, Role.OWNER, "DO_ANYTHING")
        assert result is False
        assert "DO_ANYTHING" in caplog.text

    def test_repeated_calls_are_stable(self, catalog):
        """Test that evaluation is deterministic and leaves the catalog unchanged."""
        before = catalog.to_mapping()
        answers = {
            policy_service.can(catalog, Role.FOREMAN, Permission.ASSIGN_CREWS)
            for _ in range(50)
        }
        assert answers == {False}
        assert catalog.to_mapping() == before


class TestCanAllAny:
    """Tests for multi-permission checks."""

    @pytest.mark.parametrize("role", list(Role))
    def test_can_all_empty_is_true(self, catalog, role):
        """Test that can_all over no permissions is true."""
        assert policy_service.can_all(catalog, role, []) is True

    @pytest.mark.parametrize("role", list(Role))
    def test_can_any_empty_is_false(self, catalog, role):
        """Test that can_any over no permissions is false."""
        assert policy_service.can_any(catalog, role, []) is False

    def test_can_all(self, catalog):
        """Test that can_all requires every permission."""
        perms = [Permission.VIEW_PUNCH_LIST, Permission.CREATE_PUNCH_ITEM]
        assert policy_service.can_all(catalog, Role.INSTALLER, perms) is True
        perms.append(Permission.EDIT_PUNCH_ITEM)
        assert policy_service.can_all(catalog, Role.INSTALLER, perms) is False

    def test_can_any(self, catalog):
        """Test that can_any requires one permission."""
        perms = [Permission.APPROVE_PO, Permission.SUBMIT_SUB_INVOICE]
        assert policy_service.can_any(catalog, Role.SUBCONTRACTOR, perms) is True
        assert policy_service.can_any(catalog, Role.INSTALLER, perms) is False

    def test_can_all_stops_at_first_denial(self, catalog):
        """Test that can_all does not consume the input past the first false."""
        consumed = []

        def permissions():
            for p in (Permission.VIEW_PRICING, Permission.VIEW_PHOTOS, Permission.VIEW_TEAM):
                consumed.append(p)
                yield p

        assert policy_service.can_all(catalog, Role.INSTALLER, permissions()) is False
        assert consumed == [Permission.VIEW_PRICING]

    def test_can_any_stops_at_first_grant(self, catalog):
        """Test that can_any stops at the first granted permission."""
        consumed = []

        def permissions():
            for p in (Permission.VIEW_PHOTOS, Permission.VIEW_PRICING, Permission.VIEW_TEAM):
                consumed.append(p)
                yield p

        assert policy_service.can_any(catalog, Role.INSTALLER, permissions()) is True
        assert consumed == [Permission.VIEW_PHOTOS]

    def test_unknown_role_denies_all_and_any(self, catalog):
        """Test that an unknown role fails both combined checks."""
        assert policy_service.can_all(catalog, "admin", [Permission.VIEW_TEAM]) is False
        assert policy_service.can_any(catalog, "admin", [Permission.VIEW_TEAM]) is False


class TestConvenienceChecks:
    """Tests for named checks used by the dashboard."""

    def test_can_view_pricing(self, catalog):
        """Test the pricing convenience check."""
        allowed = {r for r in Role if policy_service.can_view_pricing(catalog, r)}
        assert allowed == {Role.OWNER, Role.PROJECT_MANAGER, Role.OFFICE_ADMIN}

    def test_can_edit_punch_list(self, catalog):
        """Test the punch list convenience check."""
        allowed = {r for r in Role if policy_service.can_edit_punch_list(catalog, r)}
        assert allowed == {
            Role.OWNER,
            Role.PROJECT_MANAGER,
            Role.FOREMAN,
            Role.INSTALLER,
        }

    def test_can_manage_team(self, catalog):
        """Test the team management convenience check."""
        allowed = {r for r in Role if policy_service.can_manage_team(catalog, r)}
        assert allowed == {Role.OWNER}

    def test_granted_permissions_unknown_role(self, catalog):
        """Test that an unknown role is granted nothing."""
        assert policy_service.granted_permissions(catalog, "client") == frozenset()


class TestUserCan:
    """Tests for checks against a team member's current role."""

    def test_user_can_uses_role(self, catalog, directory):
        """Test that user_can evaluates the member's role."""
        user = directory.add_user(
            UserCreate(name="Jane Doe", email="jane@x.com", role=Role.INSTALLER)
        )
        assert policy_service.user_can(catalog, user, Permission.UPLOAD_PHOTOS) is True
        assert policy_service.user_can(catalog, user, Permission.MANAGE_USERS) is False

    def test_role_change_applies_immediately(self, catalog, directory):
        """Test that a role change is visible to the very next evaluation."""
        user = directory.add_user(
            UserCreate(name="Jane Doe", email="jane@x.com", role=Role.INSTALLER)
        )
        current_role = directory.get_user(user.id).role
        assert policy_service.can(catalog, current_role, Permission.MANAGE_USERS) is False

        directory.update_user(user.id, UserUpdate(role=Role.OWNER))

        current_role = directory.get_user(user.id).role
        assert policy_service.can(catalog, current_role, Permission.MANAGE_USERS) is True

    def test_inactive_user_has_no_capability(self, catalog, directory):
        """Test that an inactive member holds no permission."""
        user = directory.add_user(
            UserCreate(name="Jane Doe", email="jane@x.com", role=Role.OWNER)
        )
        user = directory.deactivate(user.id)
        assert policy_service.user_can(catalog, user, Permission.VIEW_TEAM) is False

    def test_unknown_stored_role_is_denied(self, catalog, fixed_now):
        """Test that a member with an unrecognized role is denied."""
        user = TeamMember(
            id=9, name="Legacy", email="legacy@x.com", role="project_manager",
            created_at=fixed_now,
        )
        assert user.has_known_role is False
        assert policy_service.user_can(catalog, user, Permission.VIEW_TEAM) is False
