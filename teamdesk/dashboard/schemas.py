"""Dashboard Pydantic v2 schemas — response models for both dashboards."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from teamdesk.leave.models import LeaveRequest
from teamdesk.tasks.schemas import TaskSummaryOut


# ═════════════════════════════════════════════════════════════════════
# Employee dashboard
# ═════════════════════════════════════════════════════════════════════


class EmployeeDashboardResponse(BaseModel):
    """Progress overview and recent leave for the logged-in employee."""

    greeting: str
    tasks: TaskSummaryOut
    leave_requests: list[LeaveRequest] = Field(default_factory=list)
    pending_leave_requests: int = 0


# ═════════════════════════════════════════════════════════════════════
# Admin dashboard
# ═════════════════════════════════════════════════════════════════════


class TeamMemberProgress(BaseModel):
    """One row of the team progress panel."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    position: str
    task_completion: int


class AdminDashboardResponse(BaseModel):
    """Top-level KPI cards for the admin dashboard."""

    total_employees: int = Field(..., description="Employees in the directory")
    average_completion: float = Field(
        ..., description="Mean task completion across employees; 0 when empty"
    )
    pending_leave_requests: int = Field(
        ..., description="Leave requests with status=pending"
    )
    team_progress: list[TeamMemberProgress] = Field(default_factory=list)
    pending_requests: list[LeaveRequest] = Field(default_factory=list)
