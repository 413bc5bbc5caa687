"""Leave Pydantic v2 schemas — request / response validation.

Submission fields are optional at the schema level so that missing input
is reported by the leave rules as ``missing-fields`` rather than as a
generic request-validation error.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


# ── Requests ────────────────────────────────────────────────────────

class LeaveRequestCreate(BaseModel):
    """Payload for submitting a leave request."""

    start_date: Optional[date] = Field(None, description="First day of leave (inclusive)")
    end_date: Optional[date] = Field(None, description="Last day of leave (inclusive)")
    reason: Optional[str] = Field(None, max_length=1000)


class LeaveDecisionRequest(BaseModel):
    """Optional reviewer comment for approve / reject."""

    comment: Optional[str] = Field(None, max_length=1000)


# ── Responses ───────────────────────────────────────────────────────

class LeaveBalanceOut(BaseModel):
    leave_type: str
    remaining_days: int


class LeaveStatsOut(BaseModel):
    """Request counts across all employees."""

    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0
