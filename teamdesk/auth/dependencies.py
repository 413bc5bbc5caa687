"""Auth dependencies — session lookup and role enforcement per request."""

from __future__ import annotations

from typing import Callable

from fastapi import Depends

from teamdesk.auth.gate import DecisionKind, authorize
from teamdesk.auth.models import Session
from teamdesk.common.constants import UserRole
from teamdesk.common.exceptions import RoleMismatchException, UnauthenticatedException
from teamdesk.store import DataStore, get_store


# ── Core dependency ─────────────────────────────────────────────────

async def get_current_session(store: DataStore = Depends(get_store)) -> Session:
    """Return the logged-in session, or ask the client to log in."""
    return _enforce(store, ())


# ── Role-based dependency ───────────────────────────────────────────

def require_role(*allowed_roles: UserRole) -> Callable:
    """Return a FastAPI dependency that runs the authorization gate.

    The session store is consulted on every call; nothing is cached
    between requests.
    """

    async def _check(store: DataStore = Depends(get_store)) -> Session:
        return _enforce(store, allowed_roles)

    return _check


def _enforce(store: DataStore, roles: tuple[UserRole, ...]) -> Session:
    session = store.sessions.get()
    decision = authorize(session, roles)
    if decision.kind == DecisionKind.redirect_login:
        raise UnauthenticatedException(location=decision.location)
    if decision.kind == DecisionKind.redirect_home:
        raise RoleMismatchException(role=decision.role.value, location=decision.location)
    return session
