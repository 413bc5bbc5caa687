"""Task Pydantic schemas — request bodies and summary response."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from teamdesk.common.constants import TaskPriority
from teamdesk.tasks.models import Task


# ── Requests ────────────────────────────────────────────────────────

class TaskCreate(BaseModel):
    """Payload for the employee "add task" action."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field("", max_length=2000)
    due_date: date
    priority: TaskPriority = TaskPriority.medium

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank.")
        return value.strip()


class ProgressUpdate(BaseModel):
    """New progress value; values outside 0–100 are clamped, not rejected."""

    progress: int


# ── Responses ───────────────────────────────────────────────────────

class TaskSummaryOut(BaseModel):
    total: int
    overall_progress: int
    not_started: int
    in_progress: int
    completed: int
    most_urgent: Optional[Task] = None
    most_urgent_due: Optional[str] = None
