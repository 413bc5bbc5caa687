"""Authorization Gate — decides whether a session may enter an area."""

from __future__ import annotations

import enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from teamdesk.auth.models import Session
from teamdesk.common.constants import HOME_PATHS, LOGIN_PATH, UserRole


class DecisionKind(str, enum.Enum):
    allow = "allow"
    redirect_login = "redirect_login"
    redirect_home = "redirect_home"


class Decision(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: DecisionKind
    location: Optional[str] = None
    role: Optional[UserRole] = None

    @property
    def allowed(self) -> bool:
        return self.kind == DecisionKind.allow


def home_path(role: UserRole) -> str:
    """Canonical landing area for *role*."""
    return HOME_PATHS[role]


def authorize(session: Optional[Session], required_roles: Iterable[UserRole] = ()) -> Decision:
    """
    Evaluate one navigation against the current session.

    * no session → redirect to login
    * no required roles → allow
    * role outside *required_roles* → redirect to the role's own landing area
    """
    if session is None or not session.authenticated:
        return Decision(kind=DecisionKind.redirect_login, location=LOGIN_PATH)

    roles = set(required_roles)
    role = session.user.role
    if roles and role not in roles:
        return Decision(kind=DecisionKind.redirect_home, location=home_path(role), role=role)

    return Decision(kind=DecisionKind.allow, role=role)
