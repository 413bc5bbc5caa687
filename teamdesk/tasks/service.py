"""Task service layer — status derivation, progress updates, statistics.

Pure rules (module-level functions) never touch the store; ``TaskService``
wraps them with repository access and the simulated round-trip.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Iterable, Optional, Sequence

from teamdesk.common.constants import ALL, MAX_PROGRESS, MIN_PROGRESS, TaskPriority, TaskStatus
from teamdesk.common.exceptions import NotFoundException
from teamdesk.common.filters import filter_tasks
from teamdesk.common.latency import load_delay, update_delay
from teamdesk.store import DataStore, TaskRepository
from teamdesk.tasks.models import Task, derive_status
from teamdesk.tasks.schemas import TaskCreate, TaskSummaryOut

logger = logging.getLogger(__name__)

__all__ = [
    "TaskService",
    "add_task",
    "count_by_status",
    "days_remaining",
    "derive_status",
    "due_label",
    "most_urgent",
    "overall_progress",
    "update_progress",
]


# ═════════════════════════════════════════════════════════════════════
# Rules
# ═════════════════════════════════════════════════════════════════════


def update_progress(task: Task, new_progress: int) -> Task:
    """Return a copy of *task* at *new_progress*, clamped to [0, 100]."""
    progress = max(MIN_PROGRESS, min(MAX_PROGRESS, int(new_progress)))
    return task.model_copy(update={"progress": progress})


def overall_progress(tasks: Sequence[Task]) -> int:
    """Mean progress rounded half-up; 0 for no tasks."""
    if not tasks:
        return 0
    mean = sum(t.progress for t in tasks) / len(tasks)
    return math.floor(mean + 0.5)


def most_urgent(tasks: Iterable[Task]) -> Optional[Task]:
    """Earliest-due incomplete task; the first one wins a tie."""
    urgent: Optional[Task] = None
    for task in tasks:
        if task.status == TaskStatus.completed:
            continue
        if urgent is None or task.due_date < urgent.due_date:
            urgent = task
    return urgent


def count_by_status(tasks: Iterable[Task], status: TaskStatus | str) -> int:
    wanted = TaskStatus(status)
    return sum(1 for t in tasks if t.status == wanted)


def add_task(
    tasks: Sequence[Task],
    *,
    title: str,
    description: str,
    due_date: date,
    priority: TaskPriority,
) -> Task:
    """Build a new not-started task with the next free id."""
    next_id = max((t.id for t in tasks), default=0) + 1
    return Task(
        id=next_id,
        title=title,
        description=description,
        due_date=due_date,
        progress=MIN_PROGRESS,
        priority=priority,
    )


def days_remaining(task: Task, today: date) -> int:
    """Whole days until the due date; negative once overdue."""
    return (task.due_date - today).days


def due_label(task: Task, today: date) -> str:
    remaining = days_remaining(task, today)
    if remaining < 0:
        return f"{abs(remaining)} days overdue"
    if remaining == 0:
        return "Due today"
    return f"{remaining} days left"


# ═════════════════════════════════════════════════════════════════════
# TaskService
# ═════════════════════════════════════════════════════════════════════


class TaskService:
    """Async task operations over the store's task repository."""

    @staticmethod
    async def list_tasks(
        store: DataStore,
        *,
        status: Optional[str] = ALL,
        priority: Optional[str] = ALL,
        search: Optional[str] = None,
    ) -> list[Task]:
        await load_delay()
        return filter_tasks(store.tasks.all(), status=status, priority=priority, search=search)

    @staticmethod
    async def create_task(store: DataStore, body: TaskCreate) -> Task:
        repo = store.tasks
        async with repo.lock:
            await update_delay()
            task = add_task(
                repo.all(),
                title=body.title,
                description=body.description,
                due_date=body.due_date,
                priority=body.priority,
            )
            repo.add(task)
        logger.info("Task %d created: %s", task.id, task.title)
        return task

    @staticmethod
    async def set_progress(store: DataStore, task_id: int, progress: int) -> Task:
        repo = store.tasks
        async with repo.lock:
            await update_delay()
            task = _get_or_404(repo, task_id)
            updated = repo.replace(update_progress(task, progress))
        logger.info(
            "Task %d progress %d → %d (%s)",
            task_id, task.progress, updated.progress, updated.status.value,
        )
        return updated

    @staticmethod
    async def get_summary(store: DataStore, *, today: Optional[date] = None) -> TaskSummaryOut:
        await load_delay()
        return summarize(store.tasks.all(), today=today or date.today())


def summarize(tasks: Sequence[Task], *, today: date) -> TaskSummaryOut:
    urgent = most_urgent(tasks)
    return TaskSummaryOut(
        total=len(tasks),
        overall_progress=overall_progress(tasks),
        not_started=count_by_status(tasks, TaskStatus.not_started),
        in_progress=count_by_status(tasks, TaskStatus.in_progress),
        completed=count_by_status(tasks, TaskStatus.completed),
        most_urgent=urgent,
        most_urgent_due=due_label(urgent, today) if urgent else None,
    )


def _get_or_404(repo: TaskRepository, task_id: int) -> Task:
    task = repo.get(task_id)
    if task is None:
        raise NotFoundException("Task", task_id)
    return task
