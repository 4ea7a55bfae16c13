# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Errors raised by the role and permission catalogs."""


class AccessControlError(Exception):
    """Base exception for access-control configuration problems."""


class CatalogError(AccessControlError):
    """The role-to-permission configuration is malformed."""


class UnknownRoleError(CatalogError, ValueError):
    """A role tag does not match any known role."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown role: {value!r}")
        self.value = value


class UnknownPermissionError(CatalogError, ValueError):
    """A permission tag does not match any known permission."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown permission: {value!r}")
        self.value = value
