"""Enums and constants for TeamDesk."""

from __future__ import annotations

import enum


# ── Auth / Roles ────────────────────────────────────────────────────

class UserRole(str, enum.Enum):
    admin = "admin"
    employee = "employee"


# ── Tasks ───────────────────────────────────────────────────────────

class TaskStatus(str, enum.Enum):
    not_started = "not-started"
    in_progress = "in-progress"
    completed = "completed"


class TaskPriority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


# ── Leave ───────────────────────────────────────────────────────────

class LeaveStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# ── Employees ───────────────────────────────────────────────────────

class EmployeeStatus(str, enum.Enum):
    active = "active"
    on_leave = "on-leave"
    inactive = "inactive"


# ── Navigation ──────────────────────────────────────────────────────

LOGIN_PATH = "/login"

# Landing area for each role after login or on a role mismatch
HOME_PATHS: dict[UserRole, str] = {
    UserRole.admin: "/admin",
    UserRole.employee: "/dashboard",
}


# ── Misc constants ──────────────────────────────────────────────────

ALL = "all"                       # filter value that passes everything through
MIN_PROGRESS = 0
MAX_PROGRESS = 100
SESSION_KEY = "user"
