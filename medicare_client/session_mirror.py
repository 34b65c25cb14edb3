"""Persistent mirror of the session's user/role/token.

The mirror is the only component that reads or writes the session keys in
durable storage. The session store seeds itself from `load()` and calls
`sync()` after every transition; the HTTP client reads the bearer token
through `read_token()` at request time.

Known limitation: `sync()` writes the three keys one at a time. A crash
between two writes can leave storage partially synced (e.g. token present,
role absent). The next successful sync or logout repairs it.
"""
import json
from typing import Any, Optional, Tuple

from medicare_client.logging_config import get_logger
from medicare_client.storage import KeyValueStorage

logger = get_logger(__name__)

TOKEN_KEY = "token"
ROLE_KEY = "role"
USER_KEY = "user"


class SessionMirror:
    """Field-by-field bridge between the session store and durable storage."""

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def load(self) -> Tuple[Optional[dict], Optional[str], Optional[str]]:
        """
        Read the persisted session.

        Returns:
            Tuple of (user, role, token); a missing key yields None
        """
        return self.read_user(), self.read_role(), self.read_token()

    def read_token(self) -> Optional[str]:
        return self.storage.get_item(TOKEN_KEY) or None

    def read_role(self) -> Optional[str]:
        return self.storage.get_item(ROLE_KEY) or None

    def read_user(self) -> Optional[dict]:
        raw = self.storage.get_item(USER_KEY)
        if not raw:
            return None

        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("stored_user_unreadable", key=USER_KEY)
            return None

    def sync(self, state: Any) -> None:
        """
        Write user, token and role from a session state snapshot.

        Each field is written when present and removed when None.

        Args:
            state: Object exposing `user`, `token` and `role`
        """
        self._write(USER_KEY, json.dumps(state.user) if state.user is not None else None)
        self._write(TOKEN_KEY, state.token)
        self._write(ROLE_KEY, state.role)
        logger.debug("session_mirrored", authenticated=state.token is not None)

    def clear(self) -> None:
        """Remove every session key."""
        for key in (TOKEN_KEY, ROLE_KEY, USER_KEY):
            self.storage.remove_item(key)
        logger.debug("session_mirror_cleared")

    def _write(self, key: str, value: Optional[str]) -> None:
        if value:
            self.storage.set_item(key, value)
        else:
            self.storage.remove_item(key)
