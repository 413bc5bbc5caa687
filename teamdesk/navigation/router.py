"""Navigation router — route resolution and per-role menu."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from teamdesk.auth.dependencies import get_current_session
from teamdesk.auth.gate import Decision
from teamdesk.auth.models import Session
from teamdesk.navigation.routes import menu_for, resolve
from teamdesk.navigation.schemas import MenuItem
from teamdesk.store import DataStore, get_store

router = APIRouter()


@router.get("/resolve", response_model=Decision)
async def resolve_path(
    path: str = Query(..., description="Client-side path being opened"),
    store: DataStore = Depends(get_store),
):
    """Run the authorization gate for *path* against the current session."""
    return resolve(path, store.sessions.get())


@router.get("/menu", response_model=list[MenuItem])
async def menu(session: Session = Depends(get_current_session)):
    return [MenuItem(path=r.path, title=r.title) for r in menu_for(session.user.role)]
