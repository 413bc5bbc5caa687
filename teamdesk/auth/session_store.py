"""Session Store — the single process-scoped record of who is logged in.

Only the user record (id, email, role, name) is persisted, under the
``"user"`` key of a small JSON document. The record is read once when the
store is created; afterwards the in-memory copy is authoritative and every
write or clear goes through to storage.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from teamdesk.auth.models import Session, User
from teamdesk.common.constants import SESSION_KEY

logger = logging.getLogger(__name__)


class SessionStore(ABC):
    """Read / write / clear access to the current session."""

    def __init__(self) -> None:
        self._session: Optional[Session] = None

    def get(self) -> Optional[Session]:
        return self._session

    def save(self, session: Session) -> None:
        self._persist(session.user)
        self._session = session

    def clear(self) -> None:
        self._erase()
        self._session = None

    @abstractmethod
    def _persist(self, user: User) -> None: ...

    @abstractmethod
    def _erase(self) -> None: ...


class MemorySessionStore(SessionStore):
    """Keeps the session for the life of the process only."""

    def __init__(self, session: Optional[Session] = None) -> None:
        super().__init__()
        self._session = session

    def _persist(self, user: User) -> None:
        pass

    def _erase(self) -> None:
        pass


class FileSessionStore(SessionStore):
    """Persists the session user to a JSON file so it survives restarts."""

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)
        user = self._load()
        if user is not None:
            self._session = Session(user=user)
            logger.info("Restored session for %s", user.email)

    def _load(self) -> Optional[User]:
        document = self._read_document()
        raw = document.get(SESSION_KEY)
        if raw is None:
            return None
        try:
            return User.model_validate(raw)
        except ValidationError:
            logger.warning("Ignoring malformed session record in %s", self.path)
            return None

    def _read_document(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.warning("Session file %s is unreadable; starting logged out", self.path)
            return {}
        return document if isinstance(document, dict) else {}

    def _write_document(self, document: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document), encoding="utf-8")

    def _persist(self, user: User) -> None:
        document = self._read_document()
        document[SESSION_KEY] = user.model_dump(mode="json")
        self._write_document(document)

    def _erase(self) -> None:
        document = self._read_document()
        if document.pop(SESSION_KEY, None) is None:
            return
        if document:
            self._write_document(document)
        else:
            self.path.unlink(missing_ok=True)
