"""Auth router — login, logout, current session."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from teamdesk.auth.dependencies import get_current_session
from teamdesk.auth.gate import home_path
from teamdesk.auth.models import Session
from teamdesk.auth.schemas import LoginRequest, LoginResponse, LogoutResponse, SessionResponse
from teamdesk.auth.service import AuthService
from teamdesk.common.constants import LOGIN_PATH
from teamdesk.common.rate_limit import limiter
from teamdesk.store import DataStore, get_store

router = APIRouter(prefix="", tags=["auth"])


# ── POST /login ─────────────────────────────────────────────────────

@router.post("/login", response_model=LoginResponse)
@limiter.limit("10/minute")
async def login(
    request: Request,
    body: LoginRequest,
    store: DataStore = Depends(get_store),
):
    session = await AuthService.login(store, body.email, body.password)
    return LoginResponse(
        user=session.user,
        authenticated=session.authenticated,
        home=home_path(session.user.role),
        message=f"Welcome back, {session.user.name}!",
    )


# ── POST /logout ────────────────────────────────────────────────────

@router.post("/logout", response_model=LogoutResponse)
async def logout(store: DataStore = Depends(get_store)):
    AuthService.logout(store)
    return LogoutResponse(redirect_to=LOGIN_PATH)


# ── GET /session ────────────────────────────────────────────────────

@router.get("/session", response_model=SessionResponse)
async def current_session(session: Session = Depends(get_current_session)):
    return SessionResponse(
        user=session.user,
        authenticated=session.authenticated,
        home=home_path(session.user.role),
    )
