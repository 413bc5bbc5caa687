"""Dashboard service — read-only aggregation over the in-memory store."""

from __future__ import annotations

from datetime import date
from typing import Optional

from teamdesk.auth.models import User
from teamdesk.common.constants import LeaveStatus
from teamdesk.common.filters import filter_by_status
from teamdesk.common.latency import load_delay
from teamdesk.dashboard.schemas import (
    AdminDashboardResponse,
    EmployeeDashboardResponse,
    TeamMemberProgress,
)
from teamdesk.leave.service import pending_count
from teamdesk.store import DataStore
from teamdesk.tasks.service import summarize


class DashboardService:
    """Async dashboard aggregation."""

    @staticmethod
    async def get_employee_dashboard(
        store: DataStore,
        user: User,
        *,
        today: Optional[date] = None,
    ) -> EmployeeDashboardResponse:
        await load_delay()
        own = [r for r in store.leave_requests.all() if r.employee_id == user.id]
        return EmployeeDashboardResponse(
            greeting=f"Welcome back, {user.name}!",
            tasks=summarize(store.tasks.all(), today=today or date.today()),
            leave_requests=own,
            pending_leave_requests=pending_count(own),
        )

    @staticmethod
    async def get_admin_dashboard(store: DataStore) -> AdminDashboardResponse:
        await load_delay()
        employees = store.employees.all()
        requests = store.leave_requests.all()
        average = (
            sum(e.task_completion for e in employees) / len(employees) if employees else 0.0
        )
        return AdminDashboardResponse(
            total_employees=len(employees),
            average_completion=average,
            pending_leave_requests=pending_count(requests),
            team_progress=[TeamMemberProgress.model_validate(e) for e in employees],
            pending_requests=filter_by_status(requests, LeaveStatus.pending),
        )
