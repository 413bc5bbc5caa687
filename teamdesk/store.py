"""In-memory repositories and the per-app data store.

Collections are held as tuples and swapped whole on every change, so a
reader that already holds a list never sees it change underneath it.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, Protocol, TypeVar

from fastapi import Request

from teamdesk.auth.directory import AuthDirectory
from teamdesk.auth.session_store import MemorySessionStore, SessionStore
from teamdesk.common import sample_data
from teamdesk.employees.models import Employee
from teamdesk.leave.models import LeaveRequest
from teamdesk.tasks.models import Task


class _Keyed(Protocol):
    id: int


T = TypeVar("T", bound=_Keyed)


class Repository(Generic[T]):
    """Ordered collection keyed by integer ``id``."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)
        # Held by services for the whole of a write, latency included
        self.lock = asyncio.Lock()

    def all(self) -> list[T]:
        return list(self._items)

    def get(self, item_id: int) -> Optional[T]:
        return next((item for item in self._items if item.id == item_id), None)

    def next_id(self) -> int:
        return max((item.id for item in self._items), default=0) + 1

    def add(self, item: T) -> T:
        self._items = self._items + (item,)
        return item

    def replace(self, item: T) -> T:
        """Swap in *item* where an entity with the same id sits."""
        if self.get(item.id) is None:
            raise KeyError(item.id)
        self._items = tuple(item if existing.id == item.id else existing for existing in self._items)
        return item

    def __len__(self) -> int:
        return len(self._items)


class TaskRepository(Repository[Task]):
    pass


class LeaveRepository(Repository[LeaveRequest]):
    pass


class EmployeeRepository(Repository[Employee]):
    pass


@dataclass
class DataStore:
    """Everything a request handler may read or write."""

    directory: AuthDirectory
    sessions: SessionStore
    tasks: TaskRepository
    leave_requests: LeaveRepository
    employees: EmployeeRepository


def build_store(
    sessions: Optional[SessionStore] = None,
    *,
    directory: Optional[Iterable[dict[str, Any]]] = None,
    tasks: Optional[Iterable[dict[str, Any]]] = None,
    leave_requests: Optional[Iterable[dict[str, Any]]] = None,
    employees: Optional[Iterable[dict[str, Any]]] = None,
) -> DataStore:
    """Build a store from the bundled sample data, or from the given seeds."""
    return DataStore(
        directory=AuthDirectory(sample_data.DIRECTORY if directory is None else directory),
        sessions=sessions if sessions is not None else MemorySessionStore(),
        tasks=TaskRepository(
            Task.model_validate(t) for t in (sample_data.TASKS if tasks is None else tasks)
        ),
        leave_requests=LeaveRepository(
            LeaveRequest.model_validate(r)
            for r in (sample_data.LEAVE_REQUESTS if leave_requests is None else leave_requests)
        ),
        employees=EmployeeRepository(
            Employee.model_validate(e)
            for e in (sample_data.EMPLOYEES if employees is None else employees)
        ),
    )


def get_store(request: Request) -> DataStore:
    """FastAPI dependency: the data store attached to the running app."""
    return request.app.state.store
