"""Auth Pydantic schemas for request / response validation."""

from pydantic import BaseModel

from teamdesk.auth.models import User


# ── Requests ────────────────────────────────────────────────────────

class LoginRequest(BaseModel):
    email: str
    password: str


# ── Responses ───────────────────────────────────────────────────────

class SessionResponse(BaseModel):
    user: User
    authenticated: bool
    home: str


class LoginResponse(SessionResponse):
    message: str


class LogoutResponse(BaseModel):
    message: str = "You have been successfully logged out."
    redirect_to: str
