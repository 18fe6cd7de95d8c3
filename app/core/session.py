"""Session/identity coordination.

The session is the mapping Starlette's ``SessionMiddleware`` exposes as
``request.session``. It carries the identity of the logged-in user and the
time the session was last renewed::

    {"user": {"id": 1, "primary_email": "a@example.com"}, "loggedInAt": "..."}
"""

import logging
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class UserDeleter(Protocol):
    async def delete_user(self, user_id: int) -> bool: ...


class SessionCoordinator:
    """Reads and mutates one request's session."""

    def __init__(self, session: MutableMapping[str, Any]):
        self.session = session

    @property
    def user(self) -> dict | None:
        return self.session.get("user")

    @property
    def user_id(self) -> int | None:
        user = self.user
        if not user:
            return None
        return user.get("id")

    def establish(self, user_id: int, primary_email: str) -> None:
        """Start a session for a user authenticated by the identity provider."""
        self.session["user"] = {"id": user_id, "primary_email": primary_email}
        self.session["loggedInAt"] = datetime.now(timezone.utc).isoformat()

    def refresh(self) -> None:
        """Renew the session on an authenticated fetch, keeping the identity it carries."""
        user = self.session.get("user")
        if user is None:
            return
        self.session.clear()
        self.session["user"] = user
        self.session["loggedInAt"] = datetime.now(timezone.utc).isoformat()

    def clear(self) -> bool:
        self.session.clear()
        logger.info("session cleared...")
        return True

    def logout(self) -> bool:
        """Clear a non-empty session. An empty session reports False; never raises."""
        if len(self.session) != 0:
            return self.clear()

        logger.info("no active session to clear...")
        return False

    async def delete_user(self, users: UserDeleter, user_id: int) -> bool:
        """Delete the user and clear the session only if the delete succeeded."""
        deleted = await users.delete_user(user_id)
        if deleted:
            self.clear()
        return deleted
