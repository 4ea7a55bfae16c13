# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Validated, immutable role-to-permission catalog.

The catalog is built once when the application starts and handed to every
evaluator call. Construction refuses malformed configuration, so a running
process always holds a consistent policy.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from src.rbac.errors import CatalogError
from src.rbac.permissions import Permission, parse_permission
from src.rbac.roles import (
    DEFAULT_ROLE_PERMISSIONS,
    ROLE_DEFINITIONS,
    ROLE_ORDER,
    Role,
    RoleDefinition,
    parse_role,
)

logger = logging.getLogger(__name__)


class RoleCatalog:
    """Read-only mapping from each role to its permission set.

    Every role must be present with a non-empty permission set holding at most
    one of the two project-scope permissions; construction raises
    `CatalogError` otherwise.
    """

    def __init__(self, role_permissions: Mapping[Role, Iterable[Permission]]) -> None:
        """Use `from_mapping` to build a catalog from configuration tags."""
        permissions: dict[Role, frozenset[Permission]] = {}
        for role in ROLE_ORDER:
            if role not in role_permissions:
                continue
            granted = frozenset(role_permissions[role])
            if not granted:
                raise CatalogError(f"Role {role.value!r} has no permissions")
            if {
                Permission.VIEW_ALL_PROJECTS,
                Permission.VIEW_ASSIGNED_PROJECTS,
            } <= granted:
                raise CatalogError(
                    f"Role {role.value!r} holds both VIEW_ALL_PROJECTS and "
                    "VIEW_ASSIGNED_PROJECTS"
                )
            permissions[role] = granted

        missing = [role.value for role in ROLE_ORDER if role not in permissions]
        if missing:
            raise CatalogError(f"No permissions configured for roles: {missing}")

        self._permissions: MappingProxyType[Role, frozenset[Permission]] = (
            MappingProxyType(permissions)
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "RoleCatalog":
        """Build a catalog from a role tag -> permission tags mapping.

        Args:
            mapping: Configuration mapping, e.g. parsed JSON

        Returns:
            Validated catalog

        Raises:
            UnknownRoleError: a key is not a known role
            UnknownPermissionError: a value is not a known permission
            CatalogError: a value is not a list of tags, a role is missing,
                has no permissions, or holds both project-scope permissions
        """
        resolved: dict[Role, frozenset[Permission]] = {}
        for role_tag, permission_tags in mapping.items():
            role = parse_role(role_tag)
            if not isinstance(permission_tags, (list, tuple)):
                raise CatalogError(
                    f"Permissions for role {role.value!r} must be a list of tags, "
                    f"got {type(permission_tags).__name__}"
                )
            resolved[role] = frozenset(parse_permission(p) for p in permission_tags)

        catalog = cls(resolved)
        logger.info(
            f"Role catalog loaded: {len(resolved)} roles, "
            f"{len(set().union(*resolved.values()))} distinct permissions"
        )
        return catalog

    @property
    def roles(self) -> tuple[Role, ...]:
        """Roles covered by this catalog, in presentation order."""
        return ROLE_ORDER

    def permissions_of(self, role: Role | str) -> frozenset[Permission]:
        """Get the permission set of a role.

        Raises:
            UnknownRoleError: if `role` is not a known role tag
        """
        return self._permissions[parse_role(role)]

    def role_info(self, role: Role | str) -> RoleDefinition:
        """Get display metadata for a role.

        Raises:
            UnknownRoleError: if `role` is not a known role tag
        """
        return ROLE_DEFINITIONS[parse_role(role)]

    def all_roles(self) -> list[RoleDefinition]:
        """Get metadata for every role in presentation order."""
        return [ROLE_DEFINITIONS[role] for role in ROLE_ORDER]

    def to_mapping(self) -> dict[str, list[str]]:
        """Export the catalog in configuration form, tags sorted."""
        return {
            role.value: sorted(p.value for p in self._permissions[role])
            for role in ROLE_ORDER
        }


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for key, value in pairs:
        if key in data:
            raise CatalogError(f"Duplicate key in role catalog: {key!r}")
        data[key] = value
    return data


def load_role_catalog_file(path: str | Path) -> RoleCatalog:
    """Load and validate a catalog from a JSON file of role -> permission tags.

    Raises:
        CatalogError: the file cannot be read, is not a JSON object, repeats a
            key, or fails catalog validation
    """
    path = Path(path)
    try:
        data = json.loads(
            path.read_text(encoding="utf-8"),
            object_pairs_hook=_reject_duplicate_keys,
        )
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Cannot read role catalog {path}: {e}") from e
    if not isinstance(data, dict):
        raise CatalogError(f"Role catalog {path} must contain a JSON object")
    return RoleCatalog.from_mapping(data)


@lru_cache(maxsize=1)
def get_default_catalog() -> RoleCatalog:
    """Get the process-wide catalog built from the built-in configuration."""
    return RoleCatalog.from_mapping(DEFAULT_ROLE_PERMISSIONS)


def load_configured_catalog(path: str | Path | None) -> RoleCatalog:
    """Load the catalog from `path`, or the built-in one when no path is set."""
    if path:
        logger.info(f"Loading role catalog from {path}")
        return load_role_catalog_file(path)
    return get_default_catalog()
