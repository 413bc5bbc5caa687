"""Auth service — directory login, logout, and session lookup."""

from __future__ import annotations

import logging
from typing import Optional

from teamdesk.auth.models import Session
from teamdesk.common.exceptions import InvalidCredentialsException
from teamdesk.common.latency import login_delay
from teamdesk.store import DataStore

logger = logging.getLogger(__name__)


class AuthService:
    """Session lifecycle: write on login, clear on logout, read otherwise."""

    @staticmethod
    async def login(store: DataStore, email: str, password: str) -> Session:
        """Check the credentials and persist a new session.

        Raises ``InvalidCredentialsException`` (and leaves the store
        untouched) when no directory entry matches exactly.
        """
        await login_delay()

        user = store.directory.lookup(email, password)
        if user is None:
            logger.info("Rejected login for %s", email)
            raise InvalidCredentialsException()

        session = Session(user=user)
        store.sessions.save(session)
        logger.info("User %s logged in as %s", user.email, user.role.value)
        return session

    @staticmethod
    def logout(store: DataStore) -> None:
        """Clear the session store, whether or not anyone was logged in."""
        previous = store.sessions.get()
        store.sessions.clear()
        if previous is not None:
            logger.info("User %s logged out", previous.user.email)

    @staticmethod
    def current_session(store: DataStore) -> Optional[Session]:
        return store.sessions.get()
