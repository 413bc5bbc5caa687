"""Leave module test suite — submission validation, decisions, API endpoints."""

from __future__ import annotations

from datetime import date

import pytest

from teamdesk.common.constants import LeaveStatus
from teamdesk.common.exceptions import (
    IllegalTransitionException,
    InvalidRangeException,
    MissingFieldsException,
)
from teamdesk.leave.service import (
    DEFAULT_APPROVE_COMMENT,
    DEFAULT_REJECT_COMMENT,
    approve,
    count_by_status,
    decide,
    leave_stats,
    pending_count,
    reject,
    submit,
    validate_submission,
)
from tests.conftest import EMPLOYEE, make_leave


# ═════════════════════════════════════════════════════════════════════
# Validation
# ═════════════════════════════════════════════════════════════════════


def test_validate_rejects_inverted_range():
    with pytest.raises(InvalidRangeException) as exc:
        validate_submission(date(2025, 5, 15), date(2025, 5, 10), "x")
    assert exc.value.error_type == "invalid-range"


def test_validate_accepts_ordered_range():
    validate_submission(date(2025, 5, 10), date(2025, 5, 15), "vacation")


def test_validate_accepts_single_day():
    validate_submission(date(2025, 5, 10), date(2025, 5, 10), "dentist")


@pytest.mark.parametrize(
    "start,end,reason,missing",
    [
        (None, date(2025, 5, 10), "x", ["start_date"]),
        (date(2025, 5, 10), None, "x", ["end_date"]),
        (date(2025, 5, 10), date(2025, 5, 11), "   ", ["reason"]),
        (None, None, None, ["start_date", "end_date", "reason"]),
    ],
)
def test_validate_missing_fields(start, end, reason, missing):
    with pytest.raises(MissingFieldsException) as exc:
        validate_submission(start, end, reason)
    assert exc.value.error_type == "missing-fields"
    assert sorted(exc.value.errors) == sorted(missing)


# ═════════════════════════════════════════════════════════════════════
# Submission
# ═════════════════════════════════════════════════════════════════════


def test_submit_builds_pending_request_with_next_id():
    existing = [make_leave(1), make_leave(4, status=LeaveStatus.approved)]
    request = submit(
        existing,
        date(2025, 6, 1),
        date(2025, 6, 3),
        "Trip",
        employee=EMPLOYEE,
        today=date(2025, 4, 22),
    )
    assert request.id == 5
    assert request.status == LeaveStatus.pending
    assert request.created_at == date(2025, 4, 22)
    assert request.comment is None
    assert request.employee_id == 2
    assert request.employee_name == "John Employee"
    assert request.days == 3


def test_submit_first_request_gets_id_one():
    request = submit([], date(2025, 6, 1), date(2025, 6, 1), "Trip")
    assert request.id == 1
    assert request.employee_id is None


def test_submit_invalid_does_not_build():
    with pytest.raises(InvalidRangeException):
        submit([], date(2025, 6, 3), date(2025, 6, 1), "Trip")


# ═════════════════════════════════════════════════════════════════════
# Decisions
# ═════════════════════════════════════════════════════════════════════


def test_decide_approves_pending():
    request = make_leave()
    decided = decide(request, LeaveStatus.approved, "Enjoy")
    assert decided.status == LeaveStatus.approved
    assert decided.comment == "Enjoy"
    assert request.status == LeaveStatus.pending
    assert request.comment is None


@pytest.mark.parametrize("outcome", [LeaveStatus.approved, LeaveStatus.rejected])
def test_decide_on_approved_is_illegal(outcome):
    with pytest.raises(IllegalTransitionException):
        decide(make_leave(status=LeaveStatus.approved), outcome, "again")


def test_decide_on_rejected_is_illegal():
    with pytest.raises(IllegalTransitionException):
        decide(make_leave(status=LeaveStatus.rejected), "approved", "again")


def test_decide_back_to_pending_is_illegal():
    with pytest.raises(IllegalTransitionException):
        decide(make_leave(), LeaveStatus.pending, "")


def test_approve_and_reject_default_comments():
    assert approve(make_leave()).comment == DEFAULT_APPROVE_COMMENT
    assert reject(make_leave()).comment == DEFAULT_REJECT_COMMENT
    assert reject(make_leave(), "No cover").comment == "No cover"


def test_pending_count():
    requests = [
        make_leave(1, employee_id=2),
        make_leave(2, employee_id=3),
        make_leave(3, status=LeaveStatus.approved, employee_id=2),
    ]
    assert pending_count(requests) == 2
    assert pending_count(requests, employee_id=2) == 1


def test_days_is_inclusive():
    assert make_leave(start_date=date(2025, 4, 25), end_date=date(2025, 4, 26)).days == 2


# ═════════════════════════════════════════════════════════════════════
# API — employee
# ═════════════════════════════════════════════════════════════════════


async def test_my_requests_only_own(client, as_employee):
    resp = await client.get("/api/v1/leave")
    assert resp.status_code == 200
    assert [r["id"] for r in resp.json()] == [1, 2, 3]
    assert all(r["employee_id"] == 2 for r in resp.json())


async def test_submit_appends_one_pending_request(client, store, as_employee):
    before = store.leave_requests.all()
    previous_max = max(r.id for r in before)

    resp = await client.post(
        "/api/v1/leave",
        json={"start_date": "2025-05-10", "end_date": "2025-05-15", "reason": "vacation"},
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] == previous_max + 1
    assert data["status"] == "pending"
    assert data["comment"] is None
    assert data["employee_name"] == "John Employee"

    after = store.leave_requests.all()
    assert len(after) == len(before) + 1
    assert after[:-1] == before
    assert after[-1].id == previous_max + 1


async def test_submit_invalid_range_endpoint(client, store, as_employee):
    before = store.leave_requests.all()
    resp = await client.post(
        "/api/v1/leave",
        json={"start_date": "2025-05-15", "end_date": "2025-05-10", "reason": "x"},
    )
    assert resp.status_code == 422
    assert resp.json()["type"].endswith("/invalid-range")
    assert store.leave_requests.all() == before


async def test_submit_missing_reason_endpoint(client, as_employee):
    resp = await client.post(
        "/api/v1/leave", json={"start_date": "2025-05-10", "end_date": "2025-05-15"},
    )
    assert resp.status_code == 422
    assert resp.json()["type"].endswith("/missing-fields")
    assert "reason" in resp.json()["errors"]


async def test_balance_endpoint(client, as_employee):
    resp = await client.get("/api/v1/leave/balance")
    assert resp.status_code == 200
    assert [b["remaining_days"] for b in resp.json()] == [14, 7, 3]


async def test_admin_cannot_submit(client, as_admin):
    resp = await client.post(
        "/api/v1/leave",
        json={"start_date": "2025-05-10", "end_date": "2025-05-15", "reason": "vacation"},
    )
    assert resp.status_code == 403


# ═════════════════════════════════════════════════════════════════════
# API — admin
# ═════════════════════════════════════════════════════════════════════


async def test_admin_list_filters(client, as_admin):
    resp = await client.get("/api/v1/admin/leave-requests", params={"status": "pending"})
    assert resp.status_code == 200
    assert [r["id"] for r in resp.json()] == [2, 4, 7]

    resp = await client.get(
        "/api/v1/admin/leave-requests", params={"status": "pending", "q": "michael"},
    )
    assert [r["id"] for r in resp.json()] == [7]

    resp = await client.get("/api/v1/admin/leave-requests", params={"q": "VACATION"})
    assert [r["id"] for r in resp.json()] == [1, 7]


async def test_admin_approve(client, store, as_admin):
    resp = await client.put("/api/v1/admin/leave-requests/2/approve")
    assert resp.status_code == 200
    assert resp.json()["status"] == "approved"
    assert resp.json()["comment"] == DEFAULT_APPROVE_COMMENT
    assert store.leave_requests.get(2).status == LeaveStatus.approved


async def test_admin_reject_with_comment(client, store, as_admin):
    resp = await client.put(
        "/api/v1/admin/leave-requests/4/reject", json={"comment": "Launch week"},
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "rejected"
    assert store.leave_requests.get(4).comment == "Launch week"


async def test_admin_decide_twice_is_conflict(client, store, as_admin):
    assert (await client.put("/api/v1/admin/leave-requests/7/approve")).status_code == 200

    resp = await client.put("/api/v1/admin/leave-requests/7/reject")
    assert resp.status_code == 409
    assert resp.json()["type"].endswith("/illegal-transition")
    assert store.leave_requests.get(7).status == LeaveStatus.approved


async def test_admin_decide_unknown(client, as_admin):
    resp = await client.put("/api/v1/admin/leave-requests/99/approve")
    assert resp.status_code == 404


async def test_employee_cannot_approve(client, as_employee):
    resp = await client.put("/api/v1/admin/leave-requests/2/approve")
    assert resp.status_code == 403
    assert resp.json()["location"] == "/dashboard"


def test_count_by_status_and_stats():
    requests = [
        make_leave(1),
        make_leave(2, status=LeaveStatus.approved),
        make_leave(3, status=LeaveStatus.approved),
        make_leave(4, status=LeaveStatus.rejected),
    ]
    assert count_by_status(requests, "approved") == 2
    stats = leave_stats(requests)
    assert (stats.total, stats.pending, stats.approved, stats.rejected) == (4, 1, 2, 1)
    assert leave_stats([]).total == 0


async def test_admin_stats_endpoint(client, as_admin):
    resp = await client.get("/api/v1/admin/leave-requests/stats")
    assert resp.status_code == 200
    assert resp.json() == {"total": 7, "pending": 3, "approved": 2, "rejected": 2}


async def test_admin_stats_follow_decisions(client, as_admin):
    await client.put("/api/v1/admin/leave-requests/2/reject")
    resp = await client.get("/api/v1/admin/leave-requests/stats")
    assert resp.json() == {"total": 7, "pending": 2, "approved": 2, "rejected": 3}


async def test_admin_stats_forbidden_for_employee(client, as_employee):
    resp = await client.get("/api/v1/admin/leave-requests/stats")
    assert resp.status_code == 403
