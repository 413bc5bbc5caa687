"""Leave service layer — submission validation, approvals, balances.

Business rules:
  - A submission needs both dates and a non-blank reason, with start <= end
  - New requests always start as pending and get the next free id
  - Only pending requests can be decided; approved/rejected are terminal
  - Approve and reject share one transition, parameterised by outcome
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from teamdesk.auth.models import User
from teamdesk.common.constants import ALL, LeaveStatus
from teamdesk.common.exceptions import (
    IllegalTransitionException,
    InvalidRangeException,
    MissingFieldsException,
    NotFoundException,
)
from teamdesk.common.filters import filter_leave_requests
from teamdesk.common.latency import load_delay, update_delay
from teamdesk.common.sample_data import LEAVE_BALANCE
from teamdesk.leave.models import LeaveRequest
from teamdesk.leave.schemas import LeaveBalanceOut, LeaveStatsOut
from teamdesk.store import DataStore

logger = logging.getLogger(__name__)

DEFAULT_APPROVE_COMMENT = "Request approved."
DEFAULT_REJECT_COMMENT = "Request rejected due to scheduling conflicts."

_TERMINAL = (LeaveStatus.approved, LeaveStatus.rejected)

_DEFAULT_COMMENTS = {
    LeaveStatus.approved: DEFAULT_APPROVE_COMMENT,
    LeaveStatus.rejected: DEFAULT_REJECT_COMMENT,
}


# ═════════════════════════════════════════════════════════════════════
# Rules
# ═════════════════════════════════════════════════════════════════════


def validate_submission(
    start_date: Optional[date],
    end_date: Optional[date],
    reason: Optional[str],
) -> None:
    """Raise ``MissingFieldsException`` or ``InvalidRangeException``."""
    missing = [
        name
        for name, value in (
            ("start_date", start_date),
            ("end_date", end_date),
            ("reason", reason.strip() if reason else None),
        )
        if not value
    ]
    if missing:
        raise MissingFieldsException(missing)
    if start_date > end_date:
        raise InvalidRangeException()


def submit(
    requests: Sequence[LeaveRequest],
    start_date: Optional[date],
    end_date: Optional[date],
    reason: Optional[str],
    *,
    employee: Optional[User] = None,
    today: Optional[date] = None,
) -> LeaveRequest:
    """Validate and build a new pending request (the caller stores it)."""
    validate_submission(start_date, end_date, reason)
    return LeaveRequest(
        id=max((r.id for r in requests), default=0) + 1,
        start_date=start_date,
        end_date=end_date,
        reason=reason,
        status=LeaveStatus.pending,
        created_at=today or date.today(),
        employee_id=employee.id if employee else None,
        employee_name=employee.name if employee else None,
    )


def decide(request: LeaveRequest, outcome: LeaveStatus | str, comment: str) -> LeaveRequest:
    """Move a pending request to *outcome* and attach *comment*."""
    outcome = LeaveStatus(outcome)
    if request.status != LeaveStatus.pending:
        raise IllegalTransitionException(
            f"Leave request {request.id} is already {request.status.value}."
        )
    if outcome not in _TERMINAL:
        raise IllegalTransitionException(
            f"Leave request cannot be moved to {outcome.value}."
        )
    return request.model_copy(update={"status": outcome, "comment": comment})


def approve(request: LeaveRequest, comment: Optional[str] = None) -> LeaveRequest:
    return decide(request, LeaveStatus.approved, comment or DEFAULT_APPROVE_COMMENT)


def reject(request: LeaveRequest, comment: Optional[str] = None) -> LeaveRequest:
    return decide(request, LeaveStatus.rejected, comment or DEFAULT_REJECT_COMMENT)


def count_by_status(
    requests: Sequence[LeaveRequest],
    status: LeaveStatus | str,
    *,
    employee_id: Optional[int] = None,
) -> int:
    wanted = LeaveStatus(status)
    return sum(
        1
        for r in requests
        if r.status == wanted and (employee_id is None or r.employee_id == employee_id)
    )


def pending_count(requests: Sequence[LeaveRequest], *, employee_id: Optional[int] = None) -> int:
    return count_by_status(requests, LeaveStatus.pending, employee_id=employee_id)


def leave_stats(requests: Sequence[LeaveRequest]) -> LeaveStatsOut:
    """Total plus one count per status, for the admin review header."""
    return LeaveStatsOut(
        total=len(requests),
        pending=count_by_status(requests, LeaveStatus.pending),
        approved=count_by_status(requests, LeaveStatus.approved),
        rejected=count_by_status(requests, LeaveStatus.rejected),
    )


# ═════════════════════════════════════════════════════════════════════
# LeaveService
# ═════════════════════════════════════════════════════════════════════


class LeaveService:
    """Async leave operations: own requests, submission, admin decisions."""

    @staticmethod
    async def list_own(
        store: DataStore,
        user: User,
        *,
        status: Optional[str] = ALL,
    ) -> list[LeaveRequest]:
        await load_delay()
        own = [r for r in store.leave_requests.all() if r.employee_id == user.id]
        return filter_leave_requests(own, status=status)

    @staticmethod
    async def list_all(
        store: DataStore,
        *,
        status: Optional[str] = ALL,
        search: Optional[str] = None,
    ) -> list[LeaveRequest]:
        await load_delay()
        return filter_leave_requests(store.leave_requests.all(), status=status, search=search)

    @staticmethod
    async def get_stats(store: DataStore) -> LeaveStatsOut:
        await load_delay()
        return leave_stats(store.leave_requests.all())

    @staticmethod
    async def submit_request(
        store: DataStore,
        user: User,
        start_date: Optional[date],
        end_date: Optional[date],
        reason: Optional[str],
    ) -> LeaveRequest:
        # Reject bad input before paying the round-trip
        validate_submission(start_date, end_date, reason)
        repo = store.leave_requests
        async with repo.lock:
            await update_delay()
            request = repo.add(submit(repo.all(), start_date, end_date, reason, employee=user))
        logger.info(
            "Leave request %d submitted by %s (%s → %s)",
            request.id, user.email, request.start_date, request.end_date,
        )
        return request

    @staticmethod
    async def decide_request(
        store: DataStore,
        request_id: int,
        outcome: LeaveStatus,
        comment: Optional[str] = None,
    ) -> LeaveRequest:
        repo = store.leave_requests
        async with repo.lock:
            await update_delay()
            request = repo.get(request_id)
            if request is None:
                raise NotFoundException("LeaveRequest", request_id)
            default = _DEFAULT_COMMENTS.get(LeaveStatus(outcome), "")
            decided = repo.replace(decide(request, outcome, comment or default))
        logger.info("Leave request %d %s", request_id, decided.status.value)
        return decided

    @staticmethod
    def get_balance() -> list[LeaveBalanceOut]:
        return [LeaveBalanceOut.model_validate(b) for b in LEAVE_BALANCE]
