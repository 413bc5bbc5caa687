"""Auth models: User, DirectoryEntry, Session."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from teamdesk.common.constants import UserRole


class User(BaseModel):
    """Authenticated identity. Never carries a password."""

    model_config = ConfigDict(frozen=True)

    id: int
    email: str
    role: UserRole
    name: str


class DirectoryEntry(User):
    """A login credential from the fixed directory."""

    password: str

    def to_user(self) -> User:
        return User(id=self.id, email=self.email, role=self.role, name=self.name)


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: User
    authenticated: bool = True
