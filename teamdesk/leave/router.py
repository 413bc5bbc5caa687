"""Leave routers — employee requests and admin approvals.

``router`` is mounted under /leave for employees; ``admin_router`` under
/admin/leave-requests for administrators.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from teamdesk.auth.dependencies import require_role
from teamdesk.auth.models import Session
from teamdesk.common.constants import ALL, LeaveStatus, UserRole
from teamdesk.leave.models import LeaveRequest
from teamdesk.leave.schemas import (
    LeaveBalanceOut,
    LeaveDecisionRequest,
    LeaveRequestCreate,
    LeaveStatsOut,
)
from teamdesk.leave.service import LeaveService
from teamdesk.store import DataStore, get_store

router = APIRouter(prefix="", tags=["leave"])
admin_router = APIRouter(prefix="", tags=["admin"])


# ── GET / ───────────────────────────────────────────────────────────

@router.get("", response_model=list[LeaveRequest])
async def my_requests(
    status: str = Query(ALL),
    session: Session = Depends(require_role(UserRole.employee)),
    store: DataStore = Depends(get_store),
):
    """The logged-in employee's leave requests."""
    return await LeaveService.list_own(store, session.user, status=status)


# ── POST / ──────────────────────────────────────────────────────────

@router.post("", response_model=LeaveRequest, status_code=201)
async def submit_request(
    body: LeaveRequestCreate,
    session: Session = Depends(require_role(UserRole.employee)),
    store: DataStore = Depends(get_store),
):
    return await LeaveService.submit_request(
        store, session.user, body.start_date, body.end_date, body.reason,
    )


# ── GET /balance ────────────────────────────────────────────────────

@router.get("/balance", response_model=list[LeaveBalanceOut])
async def balance(session: Session = Depends(require_role(UserRole.employee))):
    return LeaveService.get_balance()


# ═════════════════════════════════════════════════════════════════════
# Admin
# ═════════════════════════════════════════════════════════════════════


@admin_router.get("", response_model=list[LeaveRequest])
async def all_requests(
    status: str = Query(ALL, description='pending | approved | rejected | "all"'),
    q: Optional[str] = Query(None, description="Search employee name and reason"),
    session: Session = Depends(require_role(UserRole.admin)),
    store: DataStore = Depends(get_store),
):
    return await LeaveService.list_all(store, status=status, search=q)


@admin_router.get("/stats", response_model=LeaveStatsOut)
async def request_stats(
    session: Session = Depends(require_role(UserRole.admin)),
    store: DataStore = Depends(get_store),
):
    """Total, pending, approved and rejected counts."""
    return await LeaveService.get_stats(store)


@admin_router.put("/{request_id}/approve", response_model=LeaveRequest)
async def approve_request(
    request_id: int,
    body: Optional[LeaveDecisionRequest] = None,
    session: Session = Depends(require_role(UserRole.admin)),
    store: DataStore = Depends(get_store),
):
    """Approve a pending leave request."""
    comment = body.comment if body else None
    return await LeaveService.decide_request(store, request_id, LeaveStatus.approved, comment)


@admin_router.put("/{request_id}/reject", response_model=LeaveRequest)
async def reject_request(
    request_id: int,
    body: Optional[LeaveDecisionRequest] = None,
    session: Session = Depends(require_role(UserRole.admin)),
    store: DataStore = Depends(get_store),
):
    """Reject a pending leave request."""
    comment = body.comment if body else None
    return await LeaveService.decide_request(store, request_id, LeaveStatus.rejected, comment)
