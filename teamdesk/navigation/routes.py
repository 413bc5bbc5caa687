"""Navigation surface — which paths exist and who may open them."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from teamdesk.auth.gate import Decision, DecisionKind, authorize
from teamdesk.auth.models import Session
from teamdesk.common.constants import LOGIN_PATH, UserRole


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    title: str
    roles: frozenset[UserRole] = frozenset()
    public: bool = False


ROUTES: tuple[Route, ...] = (
    Route(path=LOGIN_PATH, title="Login", public=True),
    Route(path="/dashboard", title="Dashboard", roles=frozenset({UserRole.employee})),
    Route(path="/dashboard/tasks", title="Tasks", roles=frozenset({UserRole.employee})),
    Route(path="/dashboard/leave", title="Leave Requests", roles=frozenset({UserRole.employee})),
    Route(path="/admin", title="Dashboard", roles=frozenset({UserRole.admin})),
    Route(path="/admin/employees", title="Employees", roles=frozenset({UserRole.admin})),
    Route(path="/admin/leave-requests", title="Leave Requests", roles=frozenset({UserRole.admin})),
)

_BY_PATH = {route.path: route for route in ROUTES}


def find_route(path: str) -> Optional[Route]:
    normalized = "/" + path.strip("/") if path.strip("/") else "/"
    return _BY_PATH.get(normalized)


def resolve(path: str, session: Optional[Session]) -> Decision:
    """Decide what happens when *path* is opened with *session*.

    The root and any unknown path send the client to the login page.
    """
    route = find_route(path)
    if route is None:
        return Decision(kind=DecisionKind.redirect_login, location=LOGIN_PATH)
    if route.public:
        return Decision(kind=DecisionKind.allow)
    return authorize(session, route.roles)


def menu_for(role: UserRole) -> list[Route]:
    """Protected routes a role may open, in display order."""
    return [route for route in ROUTES if role in route.roles]
