"""Shared test fixtures — in-memory store, client, session helpers, factories.

Reusable across all test modules (auth, tasks, leave, employees, dashboard).
Simulated latency is switched off so the suite runs instantly.
"""

from __future__ import annotations

import os
import tempfile

# Configure settings before any other import touches pydantic-settings
os.environ.setdefault("LOAD_LATENCY_MS", "0")
os.environ.setdefault("UPDATE_LATENCY_MS", "0")
os.environ.setdefault("LOGIN_LATENCY_MS", "0")
os.environ.setdefault(
    "SESSION_FILE", os.path.join(tempfile.gettempdir(), "teamdesk-test", "session.json"),
)

from datetime import date
from typing import AsyncGenerator, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from teamdesk.auth.models import Session, User
from teamdesk.auth.session_store import MemorySessionStore
from teamdesk.common.constants import LeaveStatus, UserRole
from teamdesk.leave.models import LeaveRequest
from teamdesk.main import create_app
from teamdesk.store import DataStore, build_store
from teamdesk.tasks.models import Task


# ── Rate limiter ────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    """Reset rate limiter storage between tests to prevent cross-test interference."""
    from teamdesk.common.rate_limit import limiter

    limiter.reset()
    yield


# ── Store + FastAPI test client ─────────────────────────────────────

@pytest.fixture
def store() -> DataStore:
    """A fresh store seeded with the bundled sample data, logged out."""
    return build_store(MemorySessionStore())


@pytest.fixture
async def app(store):
    """Create a fresh app instance serving *store*."""
    yield create_app(store=store)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ── Sessions ────────────────────────────────────────────────────────

ADMIN = User(id=1, email="admin@example.com", role=UserRole.admin, name="Admin User")
EMPLOYEE = User(id=2, email="employee@example.com", role=UserRole.employee, name="John Employee")
JANE = User(id=3, email="jane@example.com", role=UserRole.employee, name="Jane Smith")


@pytest.fixture
def as_admin(store) -> Session:
    session = Session(user=ADMIN)
    store.sessions.save(session)
    return session


@pytest.fixture
def as_employee(store) -> Session:
    session = Session(user=EMPLOYEE)
    store.sessions.save(session)
    return session


# ── Model factories ─────────────────────────────────────────────────

def make_task(
    task_id: int = 1,
    *,
    progress: int = 0,
    due_date: date = date(2025, 4, 20),
    title: str = "Task",
    description: str = "",
    priority: str = "medium",
) -> Task:
    return Task(
        id=task_id,
        title=title,
        description=description,
        due_date=due_date,
        progress=progress,
        priority=priority,
    )


def make_leave(
    request_id: int = 1,
    *,
    status: LeaveStatus = LeaveStatus.pending,
    start_date: date = date(2025, 5, 10),
    end_date: date = date(2025, 5, 15),
    reason: str = "Annual vacation",
    comment: Optional[str] = None,
    employee_id: Optional[int] = None,
    employee_name: Optional[str] = None,
) -> LeaveRequest:
    return LeaveRequest(
        id=request_id,
        start_date=start_date,
        end_date=end_date,
        reason=reason,
        status=status,
        created_at=date(2025, 4, 1),
        comment=comment,
        employee_id=employee_id,
        employee_name=employee_name,
    )
