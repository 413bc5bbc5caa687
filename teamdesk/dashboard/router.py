"""Dashboard routers — employee overview and admin KPIs."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from teamdesk.auth.dependencies import require_role
from teamdesk.auth.models import Session
from teamdesk.common.constants import UserRole
from teamdesk.dashboard.schemas import AdminDashboardResponse, EmployeeDashboardResponse
from teamdesk.dashboard.service import DashboardService
from teamdesk.store import DataStore, get_store

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=EmployeeDashboardResponse)
async def employee_dashboard(
    session: Session = Depends(require_role(UserRole.employee)),
    store: DataStore = Depends(get_store),
):
    """Overall task progress, counts by status, most urgent task, own leave."""
    return await DashboardService.get_employee_dashboard(store, session.user)


@admin_router.get("", response_model=AdminDashboardResponse)
async def admin_dashboard(
    session: Session = Depends(require_role(UserRole.admin)),
    store: DataStore = Depends(get_store),
):
    """Team size, average completion, pending approvals."""
    return await DashboardService.get_admin_dashboard(store)
