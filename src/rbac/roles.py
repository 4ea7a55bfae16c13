# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Roles, their display metadata and the built-in permission configuration."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from src.rbac.errors import UnknownRoleError
from src.rbac.permissions import Permission


class Role(str, Enum):
    """Roles in the flooring operations hierarchy."""

    OWNER = "owner"
    PROJECT_MANAGER = "pm"
    FOREMAN = "foreman"
    INSTALLER = "installer"
    OFFICE_ADMIN = "office_admin"
    SUBCONTRACTOR = "sub"


@dataclass(frozen=True)
class RoleDefinition:
    """Display metadata for a role. Has no effect on access decisions."""

    role: Role
    label: str
    description: str
    color: str
    icon: str


# Presentation order, not a capability ranking
ROLE_ORDER: tuple[Role, ...] = (
    Role.OWNER,
    Role.PROJECT_MANAGER,
    Role.FOREMAN,
    Role.INSTALLER,
    Role.OFFICE_ADMIN,
    Role.SUBCONTRACTOR,
)

ROLE_DEFINITIONS: MappingProxyType[Role, RoleDefinition] = MappingProxyType({
    Role.OWNER: RoleDefinition(
        role=Role.OWNER,
        label="Owner",
        description="Full access to all features, financials, and team management",
        color="hsl(262, 83%, 58%)",
        icon="👑",
    ),
    Role.PROJECT_MANAGER: RoleDefinition(
        role=Role.PROJECT_MANAGER,
        label="Project Manager",
        description="Manages projects, schedules, and client relationships",
        color="hsl(221, 83%, 53%)",
        icon="📋",
    ),
    Role.FOREMAN: RoleDefinition(
        role=Role.FOREMAN,
        label="Foreman",
        description="Leads field crews, manages daily operations and punch lists",
        color="hsl(142, 76%, 36%)",
        icon="🔧",
    ),
    Role.INSTALLER: RoleDefinition(
        role=Role.INSTALLER,
        label="Installer",
        description="Field technician - updates progress, photos, and punch items",
        color="hsl(38, 92%, 50%)",
        icon="🛠️",
    ),
    Role.OFFICE_ADMIN: RoleDefinition(
        role=Role.OFFICE_ADMIN,
        label="Office Admin",
        description="Handles invoicing, scheduling coordination, and documentation",
        color="hsl(328, 85%, 46%)",
        icon="💼",
    ),
    Role.SUBCONTRACTOR: RoleDefinition(
        role=Role.SUBCONTRACTOR,
        label="Subcontractor",
        description="External contractor with limited access to assigned work",
        color="hsl(199, 89%, 48%)",
        icon="🤝",
    ),
})


def parse_role(value: Role | str) -> Role:
    """Validate a role tag coming from storage, config or the network.

    Raises:
        UnknownRoleError: if the value is not one of the six roles
    """
    try:
        return Role(value)
    except ValueError:
        raise UnknownRoleError(value) from None


# The owner holds everything except the assigned-only project scope, which
# would contradict VIEW_ALL_PROJECTS.
OWNER_PERMISSIONS = [
    p.value for p in Permission if p is not Permission.VIEW_ASSIGNED_PROJECTS
]

# Built-in role configuration. Keys and values are plain tags so the same
# shape can be loaded from a JSON file.
DEFAULT_ROLE_PERMISSIONS: dict[str, list[str]] = {
    "owner": OWNER_PERMISSIONS,
    "pm": [
        # Full financial visibility, project management
        "VIEW_PRICING", "VIEW_BUDGET", "VIEW_MARGINS",
        "VIEW_ALL_PROJECTS", "CREATE_PROJECT", "EDIT_PROJECT",
        "VIEW_ESTIMATES", "CREATE_ESTIMATE", "EDIT_ESTIMATE", "SEND_ESTIMATE",
        "VIEW_PUNCH_LIST", "CREATE_PUNCH_ITEM", "EDIT_PUNCH_ITEM",
        "COMPLETE_PUNCH_ITEM",
        "VIEW_PHOTOS", "UPLOAD_PHOTOS",
        "VIEW_DAILY_LOGS", "CREATE_DAILY_LOG", "EDIT_DAILY_LOG",
        "VIEW_CHANGE_ORDERS", "CREATE_CHANGE_ORDER", "SUBMIT_CHANGE_ORDER",
        "VIEW_SCHEDULE", "EDIT_SCHEDULE", "ASSIGN_CREWS", "VIEW_CREW_DETAILS",
        "MANAGE_CREW_AVAILABILITY", "RESOLVE_BLOCKERS",
        "VIEW_MATERIALS", "MANAGE_MATERIALS", "CREATE_PO", "RECEIVE_DELIVERY",
        "VIEW_CLIENT_INVOICES", "CREATE_CLIENT_INVOICE",
        "VIEW_SUB_INVOICES", "APPROVE_SUB_INVOICE",
        "VIEW_WALKTHROUGHS", "CREATE_WALKTHROUGH", "CONDUCT_WALKTHROUGH",
        "SIGN_OFF_PROJECT",
        "VIEW_TEAM", "ASSIGN_USERS",
        "VIEW_ALL_MESSAGES", "SEND_MESSAGES",
        "VIEW_INTELLIGENCE_CENTER", "USE_AI_ASSISTANT",
        "VIEW_SAFETY_RECORDS", "REPORT_SAFETY_INCIDENT", "MANAGE_SAFETY_INCIDENTS",
        "VIEW_MOISTURE_TESTS", "CREATE_MOISTURE_TEST",
        "VIEW_SUBFLOOR_TESTS", "CREATE_SUBFLOOR_TEST",
        "VIEW_SITE_CONDITIONS", "MANAGE_SITE_CONDITIONS",
        "VIEW_COMPLIANCE_CHECKLISTS", "MANAGE_COMPLIANCE_CHECKLISTS",
        "VIEW_CONTRACT_SCOPE", "EDIT_CONTRACT_SCOPE", "VIEW_SCOPE_HISTORY",
        "VIEW_SCHEDULE_DEPENDENCIES", "EDIT_SCHEDULE_DEPENDENCIES",
        "VIEW_SCHEDULE_VARIANCE",
        "VIEW_DELIVERY_TRACKING", "MANAGE_DELIVERY_TRACKING",
        "VIEW_PHASE_PHOTOS", "TAG_PHASE_PHOTOS",
    ],
    "foreman": [
        # Field operations, no pricing or financial access
        "VIEW_ASSIGNED_PROJECTS",
        "VIEW_PUNCH_LIST", "CREATE_PUNCH_ITEM", "EDIT_PUNCH_ITEM",
        "COMPLETE_PUNCH_ITEM",
        "VIEW_PHOTOS", "UPLOAD_PHOTOS",
        "VIEW_DAILY_LOGS", "CREATE_DAILY_LOG", "EDIT_DAILY_LOG",
        "VIEW_CHANGE_ORDERS", "CREATE_CHANGE_ORDER",
        "VIEW_SCHEDULE", "VIEW_CREW_DETAILS", "RESOLVE_BLOCKERS",
        "VIEW_MATERIALS", "RECEIVE_DELIVERY",
        "VIEW_WALKTHROUGHS", "CONDUCT_WALKTHROUGH",
        "VIEW_TEAM",
        "VIEW_PROJECT_MESSAGES", "SEND_MESSAGES",
        "VIEW_INTELLIGENCE_CENTER", "USE_AI_ASSISTANT",
        "VIEW_SAFETY_RECORDS", "REPORT_SAFETY_INCIDENT",
        "VIEW_MOISTURE_TESTS", "CREATE_MOISTURE_TEST",
        "VIEW_SUBFLOOR_TESTS", "CREATE_SUBFLOOR_TEST",
        "VIEW_SITE_CONDITIONS", "MANAGE_SITE_CONDITIONS",
        "VIEW_COMPLIANCE_CHECKLISTS", "MANAGE_COMPLIANCE_CHECKLISTS",
        "VIEW_CONTRACT_SCOPE", "VIEW_SCOPE_HISTORY",
        "VIEW_SCHEDULE_DEPENDENCIES", "VIEW_SCHEDULE_VARIANCE",
        "VIEW_DELIVERY_TRACKING", "MANAGE_DELIVERY_TRACKING",
        "VIEW_PHASE_PHOTOS", "TAG_PHASE_PHOTOS",
    ],
    "installer": [
        # Field work: punch, photos, basic logs
        "VIEW_ASSIGNED_PROJECTS",
        "VIEW_PUNCH_LIST", "CREATE_PUNCH_ITEM", "COMPLETE_PUNCH_ITEM",
        "VIEW_PHOTOS", "UPLOAD_PHOTOS",
        "VIEW_DAILY_LOGS",
        "VIEW_CHANGE_ORDERS",
        "VIEW_SCHEDULE",
        "VIEW_MATERIALS",
        "VIEW_WALKTHROUGHS", "CONDUCT_WALKTHROUGH",
        "VIEW_PROJECT_MESSAGES", "SEND_MESSAGES",
        "USE_AI_ASSISTANT",
        "VIEW_SAFETY_RECORDS", "REPORT_SAFETY_INCIDENT",
        "VIEW_MOISTURE_TESTS", "VIEW_SUBFLOOR_TESTS",
        "VIEW_SITE_CONDITIONS", "VIEW_COMPLIANCE_CHECKLISTS",
        "VIEW_CONTRACT_SCOPE",
        "VIEW_SCHEDULE_DEPENDENCIES", "VIEW_SCHEDULE_VARIANCE",
        "VIEW_DELIVERY_TRACKING",
        "VIEW_PHASE_PHOTOS", "TAG_PHASE_PHOTOS",
    ],
    "office_admin": [
        # Administrative: full visibility, limited operations
        "VIEW_PRICING", "VIEW_BUDGET", "VIEW_MARGINS",
        "VIEW_ALL_PROJECTS",
        "VIEW_ESTIMATES", "CREATE_ESTIMATE", "EDIT_ESTIMATE", "SEND_ESTIMATE",
        "VIEW_PUNCH_LIST",
        "VIEW_PHOTOS",
        "VIEW_DAILY_LOGS",
        "VIEW_CHANGE_ORDERS",
        "VIEW_SCHEDULE",
        "VIEW_MATERIALS", "MANAGE_MATERIALS", "CREATE_PO",
        "VIEW_CLIENT_INVOICES", "CREATE_CLIENT_INVOICE", "SEND_INVOICE",
        "VIEW_SUB_INVOICES",
        "VIEW_WALKTHROUGHS",
        "VIEW_TEAM",
        "VIEW_ALL_MESSAGES", "SEND_MESSAGES",
        "VIEW_INTELLIGENCE_CENTER", "USE_AI_ASSISTANT",
        "VIEW_SAFETY_RECORDS", "REPORT_SAFETY_INCIDENT",
        "VIEW_MOISTURE_TESTS", "VIEW_SUBFLOOR_TESTS",
        "VIEW_SITE_CONDITIONS",
        "VIEW_COMPLIANCE_CHECKLISTS", "MANAGE_COMPLIANCE_CHECKLISTS",
        "VIEW_CONTRACT_SCOPE", "VIEW_SCOPE_HISTORY",
        "VIEW_SCHEDULE_DEPENDENCIES", "VIEW_SCHEDULE_VARIANCE",
        "VIEW_DELIVERY_TRACKING", "MANAGE_DELIVERY_TRACKING",
        "VIEW_PHASE_PHOTOS",
    ],
    "sub": [
        "VIEW_ASSIGNED_PROJECTS",
        "VIEW_PHOTOS",
        "VIEW_SCHEDULE",
        "VIEW_MATERIALS",
        "VIEW_SUB_INVOICES", "SUBMIT_SUB_INVOICE",
        "VIEW_PROJECT_MESSAGES", "SEND_MESSAGES",
        "VIEW_SAFETY_RECORDS", "REPORT_SAFETY_INCIDENT", "VIEW_SITE_CONDITIONS",
        "VIEW_SCHEDULE_DEPENDENCIES", "VIEW_DELIVERY_TRACKING",
        "VIEW_PHASE_PHOTOS",
    ],
}
