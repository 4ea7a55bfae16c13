# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Closed catalog of permission tags, grouped by feature area."""

from enum import Enum
from types import MappingProxyType

from src.rbac.errors import UnknownPermissionError


class PermissionArea(str, Enum):
    """Feature area a permission belongs to."""

    FINANCIAL = "financial"
    PROJECT = "project"
    ESTIMATE = "estimate"
    PUNCH_LIST = "punch_list"
    PHOTOS = "photos"
    DAILY_LOGS = "daily_logs"
    CHANGE_ORDERS = "change_orders"
    SCHEDULE = "schedule"
    MATERIALS = "materials"
    INVOICING = "invoicing"
    WALKTHROUGHS = "walkthroughs"
    TEAM = "team"
    COMMUNICATION = "communication"
    INTELLIGENCE = "intelligence"
    SAFETY = "safety"
    RECORDS = "records"


class Permission(str, Enum):
    """Every capability a role can hold.

    Values are the tags stored in role configuration files.
    """

    # Financial
    VIEW_PRICING = "VIEW_PRICING"
    VIEW_BUDGET = "VIEW_BUDGET"
    EDIT_BUDGET = "EDIT_BUDGET"
    VIEW_MARGINS = "VIEW_MARGINS"
    APPROVE_EXPENSES = "APPROVE_EXPENSES"

    # Projects
    VIEW_ALL_PROJECTS = "VIEW_ALL_PROJECTS"
    VIEW_ASSIGNED_PROJECTS = "VIEW_ASSIGNED_PROJECTS"
    CREATE_PROJECT = "CREATE_PROJECT"
    EDIT_PROJECT = "EDIT_PROJECT"
    DELETE_PROJECT = "DELETE_PROJECT"

    # Estimates
    VIEW_ESTIMATES = "VIEW_ESTIMATES"
    CREATE_ESTIMATE = "CREATE_ESTIMATE"
    EDIT_ESTIMATE = "EDIT_ESTIMATE"
    SEND_ESTIMATE = "SEND_ESTIMATE"
    APPROVE_ESTIMATE = "APPROVE_ESTIMATE"

    # Punch list
    VIEW_PUNCH_LIST = "VIEW_PUNCH_LIST"
    CREATE_PUNCH_ITEM = "CREATE_PUNCH_ITEM"
    EDIT_PUNCH_ITEM = "EDIT_PUNCH_ITEM"
    COMPLETE_PUNCH_ITEM = "COMPLETE_PUNCH_ITEM"
    DELETE_PUNCH_ITEM = "DELETE_PUNCH_ITEM"

    # Photos
    VIEW_PHOTOS = "VIEW_PHOTOS"
    UPLOAD_PHOTOS = "UPLOAD_PHOTOS"
    DELETE_PHOTOS = "DELETE_PHOTOS"

    # Daily logs
    VIEW_DAILY_LOGS = "VIEW_DAILY_LOGS"
    CREATE_DAILY_LOG = "CREATE_DAILY_LOG"
    EDIT_DAILY_LOG = "EDIT_DAILY_LOG"

    # Change orders
    VIEW_CHANGE_ORDERS = "VIEW_CHANGE_ORDERS"
    CREATE_CHANGE_ORDER = "CREATE_CHANGE_ORDER"
    SUBMIT_CHANGE_ORDER = "SUBMIT_CHANGE_ORDER"
    APPROVE_CHANGE_ORDER = "APPROVE_CHANGE_ORDER"

    # Schedule and crews
    VIEW_SCHEDULE = "VIEW_SCHEDULE"
    EDIT_SCHEDULE = "EDIT_SCHEDULE"
    ASSIGN_CREWS = "ASSIGN_CREWS"
    VIEW_CREW_DETAILS = "VIEW_CREW_DETAILS"
    MANAGE_CREW_AVAILABILITY = "MANAGE_CREW_AVAILABILITY"
    RESOLVE_BLOCKERS = "RESOLVE_BLOCKERS"

    # Materials
    VIEW_MATERIALS = "VIEW_MATERIALS"
    MANAGE_MATERIALS = "MANAGE_MATERIALS"
    CREATE_PO = "CREATE_PO"
    APPROVE_PO = "APPROVE_PO"
    RECEIVE_DELIVERY = "RECEIVE_DELIVERY"

    # Invoicing
    VIEW_CLIENT_INVOICES = "VIEW_CLIENT_INVOICES"
    CREATE_CLIENT_INVOICE = "CREATE_CLIENT_INVOICE"
    SEND_INVOICE = "SEND_INVOICE"
    VIEW_SUB_INVOICES = "VIEW_SUB_INVOICES"
    SUBMIT_SUB_INVOICE = "SUBMIT_SUB_INVOICE"
    APPROVE_SUB_INVOICE = "APPROVE_SUB_INVOICE"

    # Walkthroughs
    VIEW_WALKTHROUGHS = "VIEW_WALKTHROUGHS"
    CREATE_WALKTHROUGH = "CREATE_WALKTHROUGH"
    CONDUCT_WALKTHROUGH = "CONDUCT_WALKTHROUGH"
    SIGN_OFF_PROJECT = "SIGN_OFF_PROJECT"

    # Team
    VIEW_TEAM = "VIEW_TEAM"
    MANAGE_USERS = "MANAGE_USERS"
    ASSIGN_USERS = "ASSIGN_USERS"

    # Communication
    VIEW_ALL_MESSAGES = "VIEW_ALL_MESSAGES"
    VIEW_PROJECT_MESSAGES = "VIEW_PROJECT_MESSAGES"
    SEND_MESSAGES = "SEND_MESSAGES"

    # AI assistant
    VIEW_INTELLIGENCE_CENTER = "VIEW_INTELLIGENCE_CENTER"
    USE_AI_ASSISTANT = "USE_AI_ASSISTANT"

    # Safety and compliance
    VIEW_SAFETY_RECORDS = "VIEW_SAFETY_RECORDS"
    REPORT_SAFETY_INCIDENT = "REPORT_SAFETY_INCIDENT"
    MANAGE_SAFETY_INCIDENTS = "MANAGE_SAFETY_INCIDENTS"
    VIEW_MOISTURE_TESTS = "VIEW_MOISTURE_TESTS"
    CREATE_MOISTURE_TEST = "CREATE_MOISTURE_TEST"
    VIEW_SUBFLOOR_TESTS = "VIEW_SUBFLOOR_TESTS"
    CREATE_SUBFLOOR_TEST = "CREATE_SUBFLOOR_TEST"
    VIEW_SITE_CONDITIONS = "VIEW_SITE_CONDITIONS"
    MANAGE_SITE_CONDITIONS = "MANAGE_SITE_CONDITIONS"
    VIEW_COMPLIANCE_CHECKLISTS = "VIEW_COMPLIANCE_CHECKLISTS"
    MANAGE_COMPLIANCE_CHECKLISTS = "MANAGE_COMPLIANCE_CHECKLISTS"

    # Project records: scope, dependencies, deliveries, phase photos
    VIEW_CONTRACT_SCOPE = "VIEW_CONTRACT_SCOPE"
    EDIT_CONTRACT_SCOPE = "EDIT_CONTRACT_SCOPE"
    VIEW_SCOPE_HISTORY = "VIEW_SCOPE_HISTORY"
    VIEW_SCHEDULE_DEPENDENCIES = "VIEW_SCHEDULE_DEPENDENCIES"
    EDIT_SCHEDULE_DEPENDENCIES = "EDIT_SCHEDULE_DEPENDENCIES"
    VIEW_SCHEDULE_VARIANCE = "VIEW_SCHEDULE_VARIANCE"
    VIEW_DELIVERY_TRACKING = "VIEW_DELIVERY_TRACKING"
    MANAGE_DELIVERY_TRACKING = "MANAGE_DELIVERY_TRACKING"
    VIEW_PHASE_PHOTOS = "VIEW_PHASE_PHOTOS"
    TAG_PHASE_PHOTOS = "TAG_PHASE_PHOTOS"


_AREA_MEMBERS: dict[PermissionArea, list[Permission]] = {
    PermissionArea.FINANCIAL: [
        Permission.VIEW_PRICING,
        Permission.VIEW_BUDGET,
        Permission.EDIT_BUDGET,
        Permission.VIEW_MARGINS,
        Permission.APPROVE_EXPENSES,
    ],
    PermissionArea.PROJECT: [
        Permission.VIEW_ALL_PROJECTS,
        Permission.VIEW_ASSIGNED_PROJECTS,
        Permission.CREATE_PROJECT,
        Permission.EDIT_PROJECT,
        Permission.DELETE_PROJECT,
    ],
    PermissionArea.ESTIMATE: [
        Permission.VIEW_ESTIMATES,
        Permission.CREATE_ESTIMATE,
        Permission.EDIT_ESTIMATE,
        Permission.SEND_ESTIMATE,
        Permission.APPROVE_ESTIMATE,
    ],
    PermissionArea.PUNCH_LIST: [
        Permission.VIEW_PUNCH_LIST,
        Permission.CREATE_PUNCH_ITEM,
        Permission.EDIT_PUNCH_ITEM,
        Permission.COMPLETE_PUNCH_ITEM,
        Permission.DELETE_PUNCH_ITEM,
    ],
    PermissionArea.PHOTOS: [
        Permission.VIEW_PHOTOS,
        Permission.UPLOAD_PHOTOS,
        Permission.DELETE_PHOTOS,
    ],
    PermissionArea.DAILY_LOGS: [
        Permission.VIEW_DAILY_LOGS,
        Permission.CREATE_DAILY_LOG,
        Permission.EDIT_DAILY_LOG,
    ],
    PermissionArea.CHANGE_ORDERS: [
        Permission.VIEW_CHANGE_ORDERS,
        Permission.CREATE_CHANGE_ORDER,
        Permission.SUBMIT_CHANGE_ORDER,
        Permission.APPROVE_CHANGE_ORDER,
    ],
    PermissionArea.SCHEDULE: [
        Permission.VIEW_SCHEDULE,
        Permission.EDIT_SCHEDULE,
        Permission.ASSIGN_CREWS,
        Permission.VIEW_CREW_DETAILS,
        Permission.MANAGE_CREW_AVAILABILITY,
        Permission.RESOLVE_BLOCKERS,
    ],
    PermissionArea.MATERIALS: [
        Permission.VIEW_MATERIALS,
        Permission.MANAGE_MATERIALS,
        Permission.CREATE_PO,
        Permission.APPROVE_PO,
        Permission.RECEIVE_DELIVERY,
    ],
    PermissionArea.INVOICING: [
        Permission.VIEW_CLIENT_INVOICES,
        Permission.CREATE_CLIENT_INVOICE,
        Permission.SEND_INVOICE,
        Permission.VIEW_SUB_INVOICES,
        Permission.SUBMIT_SUB_INVOICE,
        Permission.APPROVE_SUB_INVOICE,
    ],
    PermissionArea.WALKTHROUGHS: [
        Permission.VIEW_WALKTHROUGHS,
        Permission.CREATE_WALKTHROUGH,
        Permission.CONDUCT_WALKTHROUGH,
        Permission.SIGN_OFF_PROJECT,
    ],
    PermissionArea.TEAM: [
        Permission.VIEW_TEAM,
        Permission.MANAGE_USERS,
        Permission.ASSIGN_USERS,
    ],
    PermissionArea.COMMUNICATION: [
        Permission.VIEW_ALL_MESSAGES,
        Permission.VIEW_PROJECT_MESSAGES,
        Permission.SEND_MESSAGES,
    ],
    PermissionArea.INTELLIGENCE: [
        Permission.VIEW_INTELLIGENCE_CENTER,
        Permission.USE_AI_ASSISTANT,
    ],
    PermissionArea.SAFETY: [
        Permission.VIEW_SAFETY_RECORDS,
        Permission.REPORT_SAFETY_INCIDENT,
        Permission.MANAGE_SAFETY_INCIDENTS,
        Permission.VIEW_MOISTURE_TESTS,
        Permission.CREATE_MOISTURE_TEST,
        Permission.VIEW_SUBFLOOR_TESTS,
        Permission.CREATE_SUBFLOOR_TEST,
        Permission.VIEW_SITE_CONDITIONS,
        Permission.MANAGE_SITE_CONDITIONS,
        Permission.VIEW_COMPLIANCE_CHECKLISTS,
        Permission.MANAGE_COMPLIANCE_CHECKLISTS,
    ],
    PermissionArea.RECORDS: [
        Permission.VIEW_CONTRACT_SCOPE,
        Permission.EDIT_CONTRACT_SCOPE,
        Permission.VIEW_SCOPE_HISTORY,
        Permission.VIEW_SCHEDULE_DEPENDENCIES,
        Permission.EDIT_SCHEDULE_DEPENDENCIES,
        Permission.VIEW_SCHEDULE_VARIANCE,
        Permission.VIEW_DELIVERY_TRACKING,
        Permission.MANAGE_DELIVERY_TRACKING,
        Permission.VIEW_PHASE_PHOTOS,
        Permission.TAG_PHASE_PHOTOS,
    ],
}

PERMISSION_AREAS: MappingProxyType[Permission, PermissionArea] = MappingProxyType(
    {perm: area for area, members in _AREA_MEMBERS.items() for perm in members}
)


def permissions_in_area(area: PermissionArea) -> list[Permission]:
    """Return the permissions of a feature area in catalog order."""
    return [perm for perm in Permission if PERMISSION_AREAS[perm] is area]


def parse_permission(value: Permission | str) -> Permission:
    """Validate a permission tag coming from storage, config or the network.

    Raises:
        UnknownPermissionError: if the value is not a catalog member
    """
    try:
        return Permission(value)
    except ValueError:
        raise UnknownPermissionError(value) from None
