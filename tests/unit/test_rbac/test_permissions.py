# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the permission catalog."""

import pytest

from src.rbac.errors import CatalogError, UnknownPermissionError
from src.rbac.permissions import (
    PERMISSION_AREAS,
    Permission,
    PermissionArea,
    parse_permission,
    permissions_in_area,
)


class TestPermissionAreas:
    """Tests for feature-area grouping."""

    def test_every_permission_has_an_area(self):
        """Test that the area mapping covers the whole catalog."""
        assert set(PERMISSION_AREAS) == set(Permission)

    def test_areas_partition_the_catalog(self):
        """Test that each permission is listed in exactly one area."""
        listed = [p for area in PermissionArea for p in permissions_in_area(area)]
        assert len(listed) == len(Permission)
        assert set(listed) == set(Permission)

    def test_every_area_is_used(self):
        """Test that no feature area is empty."""
        for area in PermissionArea:
            assert permissions_in_area(area), area

    def test_project_area_holds_scope_permissions(self):
        """Test that the project-scope tags live in the project area."""
        project = permissions_in_area(PermissionArea.PROJECT)
        assert Permission.VIEW_ALL_PROJECTS in project
        assert Permission.VIEW_ASSIGNED_PROJECTS in project

    def test_area_listing_keeps_catalog_order(self):
        """Test that permissions of an area come back in declaration order."""
        assert permissions_in_area(PermissionArea.PHOTOS) == [
            Permission.VIEW_PHOTOS,
            Permission.UPLOAD_PHOTOS,
            Permission.DELETE_PHOTOS,
        ]

    def test_mapping_is_read_only(self):
        """Test that the area mapping cannot be modified."""
        with pytest.raises(TypeError):
            PERMISSION_AREAS[Permission.VIEW_PRICING] = PermissionArea.TEAM


class TestParsePermission:
    """Tests for validating permission tags."""

    def test_parse_known_tag(self):
        """Test parsing a known permission tag."""
        assert parse_permission("VIEW_PRICING") is Permission.VIEW_PRICING

    def test_parse_enum_member(self):
        """Test that parsing a member returns it unchanged."""
        assert parse_permission(Permission.SEND_MESSAGES) is Permission.SEND_MESSAGES

    @pytest.mark.parametrize("value", ["view_pricing", "VIEW_EVERYTHING", "", "*"])
    def test_parse_unknown_tag(self, value):
        """Test that tags outside the catalog are rejected, including case variants."""
        with pytest.raises(UnknownPermissionError) as exc_info:
            parse_permission(value)
        assert exc_info.value.value == value

    def test_unknown_permission_is_a_catalog_error(self):
        """Test that the error can be handled as a catalog or value error."""
        with pytest.raises(CatalogError):
            parse_permission("NOPE")
        with pytest.raises(ValueError):
            parse_permission("NOPE")
