"""Fixed credential directory used by the authentication service."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from teamdesk.auth.models import DirectoryEntry, User


class AuthDirectory:
    """Immutable list of valid logins. Emails are unique."""

    def __init__(self, entries: Iterable[dict[str, Any] | DirectoryEntry]) -> None:
        self._entries = tuple(DirectoryEntry.model_validate(e) for e in entries)
        seen: set[str] = set()
        for entry in self._entries:
            if entry.email in seen:
                raise ValueError(f"Duplicate directory email: {entry.email}")
            seen.add(entry.email)

    def lookup(self, email: str, password: str) -> Optional[User]:
        """Exact (email, password) match, returned without the password."""
        for entry in self._entries:
            if entry.email == email and entry.password == password:
                return entry.to_user()
        return None

    def __len__(self) -> int:
        return len(self._entries)
