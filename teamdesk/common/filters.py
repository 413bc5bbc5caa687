"""In-memory filtering, search and grouping utilities.

Every function here is pure: it returns a new list (or new aggregate) and
never reorders or mutates the collection it was given.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, TypeVar

from teamdesk.common.constants import ALL

T = TypeVar("T")

TASK_SEARCH_FIELDS = ("title", "description")
EMPLOYEE_SEARCH_FIELDS = ("name", "email", "position", "department")
LEAVE_SEARCH_FIELDS = ("employee_name", "reason")


# ── Categorical filtering ──────────────────────────────────────────

def apply_filters(items: Iterable[T], filters: dict[str, Any]) -> list[T]:
    """
    Keep the items whose attributes equal every value in *filters*.

    ``None`` values and the ``"all"`` sentinel are skipped, so an empty or
    all-pass-through dict returns a copy of the input in the same order.
    """
    active = {
        key: _plain(value)
        for key, value in filters.items()
        if value is not None and _plain(value) != ALL
    }
    return [
        item
        for item in items
        if all(_plain(getattr(item, key, None)) == value for key, value in active.items())
    ]


def filter_by_status(items: Iterable[T], status: Optional[str]) -> list[T]:
    return apply_filters(items, {"status": status})


def filter_by_priority(items: Iterable[T], priority: Optional[str]) -> list[T]:
    return apply_filters(items, {"priority": priority})


# ── Free-text search ────────────────────────────────────────────────

def apply_search(
    items: Iterable[T],
    search: Optional[str],
    fields: Sequence[str],
) -> list[T]:
    """
    Case-insensitive substring match of *search* against *fields*.
    The query is matched as given, surrounding whitespace included.

    A blank or whitespace-only query passes everything through. Fields
    that are missing or ``None`` on an item never match.
    """
    if not search or not search.strip():
        return list(items)

    needle = search.lower()
    return [
        item
        for item in items
        if any(needle in str(value).lower() for value in _values(item, fields))
    ]


# ── Per-entity pipelines (categories first, then text) ─────────────

def filter_tasks(
    tasks: Iterable[T],
    *,
    status: Optional[str] = ALL,
    priority: Optional[str] = ALL,
    search: Optional[str] = None,
) -> list[T]:
    result = filter_by_status(tasks, status)
    result = filter_by_priority(result, priority)
    return apply_search(result, search, TASK_SEARCH_FIELDS)


def filter_leave_requests(
    requests: Iterable[T],
    *,
    status: Optional[str] = ALL,
    search: Optional[str] = None,
) -> list[T]:
    result = filter_by_status(requests, status)
    return apply_search(result, search, LEAVE_SEARCH_FIELDS)


def filter_employees(employees: Iterable[T], *, search: Optional[str] = None) -> list[T]:
    return apply_search(employees, search, EMPLOYEE_SEARCH_FIELDS)


# ── Grouping ────────────────────────────────────────────────────────

def department_stats(employees: Iterable[Any]) -> list[dict[str, Any]]:
    """
    Group employees by ``department`` and compute per-group statistics.

    Returns ``[{"department", "count", "average_completion"}, ...]`` in the
    order each department is first seen. ``average_completion`` is the
    unrounded mean of ``task_completion`` and is ``0.0`` for an empty group.
    """
    groups: dict[str, dict[str, int]] = {}
    for emp in employees:
        group = groups.setdefault(emp.department, {"count": 0, "total": 0})
        group["count"] += 1
        group["total"] += emp.task_completion

    return [
        {
            "department": name,
            "count": group["count"],
            "average_completion": group["total"] / group["count"] if group["count"] else 0.0,
        }
        for name, group in groups.items()
    ]


# ── Internal helpers ────────────────────────────────────────────────

def _plain(value: Any) -> Any:
    """Reduce str-enums to their value so ``"completed"`` matches the enum member."""
    return getattr(value, "value", value)


def _values(item: Any, fields: Sequence[str]) -> list[Any]:
    values = (getattr(item, name, None) for name in fields)
    return [v for v in values if v is not None]
