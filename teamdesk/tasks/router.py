"""Tasks router — employee task list, add, progress update, summary."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from teamdesk.auth.dependencies import require_role
from teamdesk.auth.models import Session
from teamdesk.common.constants import ALL, UserRole
from teamdesk.store import DataStore, get_store
from teamdesk.tasks.models import Task
from teamdesk.tasks.schemas import ProgressUpdate, TaskCreate, TaskSummaryOut
from teamdesk.tasks.service import TaskService

router = APIRouter(prefix="", tags=["tasks"])

employee_only = require_role(UserRole.employee)


# ── GET / ───────────────────────────────────────────────────────────

@router.get("", response_model=list[Task])
async def list_tasks(
    status: str = Query(ALL, description='not-started | in-progress | completed | "all"'),
    priority: str = Query(ALL, description='low | medium | high | "all"'),
    q: Optional[str] = Query(None, description="Search title and description"),
    session: Session = Depends(employee_only),
    store: DataStore = Depends(get_store),
):
    return await TaskService.list_tasks(store, status=status, priority=priority, search=q)


# ── POST / ──────────────────────────────────────────────────────────

@router.post("", response_model=Task, status_code=201)
async def create_task(
    body: TaskCreate,
    session: Session = Depends(employee_only),
    store: DataStore = Depends(get_store),
):
    return await TaskService.create_task(store, body)


# ── PUT /{id}/progress ──────────────────────────────────────────────

@router.put("/{task_id}/progress", response_model=Task)
async def update_progress(
    task_id: int,
    body: ProgressUpdate,
    session: Session = Depends(employee_only),
    store: DataStore = Depends(get_store),
):
    """Set progress; status follows automatically."""
    return await TaskService.set_progress(store, task_id, body.progress)


# ── GET /summary ────────────────────────────────────────────────────

@router.get("/summary", response_model=TaskSummaryOut)
async def summary(
    session: Session = Depends(employee_only),
    store: DataStore = Depends(get_store),
):
    return await TaskService.get_summary(store)
