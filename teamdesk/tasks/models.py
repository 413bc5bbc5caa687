"""Task model — status is derived from progress, never stored."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, computed_field

from teamdesk.common.constants import MAX_PROGRESS, MIN_PROGRESS, TaskPriority, TaskStatus


def derive_status(progress: int) -> TaskStatus:
    """0 → not-started, 100 → completed, anything between → in-progress."""
    if progress <= MIN_PROGRESS:
        return TaskStatus.not_started
    if progress >= MAX_PROGRESS:
        return TaskStatus.completed
    return TaskStatus.in_progress


class Task(BaseModel):
    """A unit of work tracked by completion progress.

    Any ``status`` present in input data is ignored; the value exposed on
    the model is always recomputed from ``progress``.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str = ""
    due_date: date
    progress: int = Field(0, ge=MIN_PROGRESS, le=MAX_PROGRESS)
    priority: TaskPriority = TaskPriority.medium

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> TaskStatus:
        return derive_status(self.progress)
