"""Employee service — admin directory listing and department statistics."""

from __future__ import annotations

from typing import Optional

from teamdesk.common.filters import department_stats, filter_employees
from teamdesk.common.latency import load_delay
from teamdesk.employees.models import Employee
from teamdesk.employees.schemas import DepartmentStatsOut
from teamdesk.leave.service import pending_count
from teamdesk.store import DataStore


class EmployeeService:
    """Read-only employee operations for the admin area."""

    @staticmethod
    def with_pending_leaves(store: DataStore) -> list[Employee]:
        """Employees with ``pending_leaves`` counted from the leave repository."""
        requests = store.leave_requests.all()
        return [
            emp.model_copy(update={"pending_leaves": pending_count(requests, employee_id=emp.id)})
            for emp in store.employees.all()
        ]

    @staticmethod
    async def list_employees(store: DataStore, *, search: Optional[str] = None) -> list[Employee]:
        await load_delay()
        return filter_employees(EmployeeService.with_pending_leaves(store), search=search)

    @staticmethod
    async def get_department_stats(store: DataStore) -> list[DepartmentStatsOut]:
        await load_delay()
        return [DepartmentStatsOut(**row) for row in department_stats(store.employees.all())]
