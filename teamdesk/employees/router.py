"""Employees router — admin employee table and department cards."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from teamdesk.auth.dependencies import require_role
from teamdesk.auth.models import Session
from teamdesk.common.constants import UserRole
from teamdesk.employees.models import Employee
from teamdesk.employees.schemas import DepartmentStatsOut
from teamdesk.employees.service import EmployeeService
from teamdesk.store import DataStore, get_store

employees_router = APIRouter()
departments_router = APIRouter()


@employees_router.get("", response_model=list[Employee])
async def list_employees(
    q: Optional[str] = Query(None, description="Search name, email, position, department"),
    session: Session = Depends(require_role(UserRole.admin)),
    store: DataStore = Depends(get_store),
):
    return await EmployeeService.list_employees(store, search=q)


@departments_router.get("", response_model=list[DepartmentStatsOut])
async def list_departments(
    session: Session = Depends(require_role(UserRole.admin)),
    store: DataStore = Depends(get_store),
):
    """Per-department headcount and average task completion."""
    return await EmployeeService.get_department_stats(store)
