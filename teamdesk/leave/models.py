"""Leave request model."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field

from teamdesk.common.constants import LeaveStatus


class LeaveRequest(BaseModel):
    """An employee-submitted request for absence over an inclusive date range."""

    model_config = ConfigDict(frozen=True)

    id: int
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus = LeaveStatus.pending
    created_at: date
    comment: Optional[str] = None
    employee_id: Optional[int] = None
    employee_name: Optional[str] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def days(self) -> int:
        """Calendar days covered, both ends included."""
        return abs((self.end_date - self.start_date).days) + 1
