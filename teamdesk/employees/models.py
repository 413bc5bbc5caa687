"""Employee record as seen from the admin area."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from teamdesk.common.constants import EmployeeStatus


class Employee(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    position: str
    department: str
    task_completion: int = Field(0, ge=0, le=100)
    status: EmployeeStatus = EmployeeStatus.active
    pending_leaves: int = 0
