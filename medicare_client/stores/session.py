"""Session store: who is logged in, with which role and bearer token.

State machine (token presence x request in flight):

    ANONYMOUS      --LOGIN_START-->    AUTHENTICATING
    AUTHENTICATING --LOGIN_SUCCESS-->  AUTHENTICATED
    AUTHENTICATING --LOGIN_FAILURE-->  ANONYMOUS (error set)
    AUTHENTICATED  --LOGOUT-->         ANONYMOUS
    AUTHENTICATED  --UPDATE_USER-->    AUTHENTICATED
    any            --CLEAR_ERROR-->    same state, error cleared

REGISTER_* only toggle is_loading/error; registering never logs anyone in.

Invariant: user, role and token are set together and cleared together.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from medicare_client.envelope import Envelope, Failure, Success
from medicare_client.logging_config import get_logger
from medicare_client.notifications import Notifier, LogNotifier
from medicare_client.services.auth import AuthService
from medicare_client.session_mirror import SessionMirror
from medicare_client.stores.base import Action, Store

logger = get_logger(__name__)


class AuthStatus(str, Enum):
    """Derived authentication status."""
    ANONYMOUS = "anonymous"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"


class SessionAction(str, Enum):
    LOGIN_START = "LOGIN_START"
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    LOGIN_FAILURE = "LOGIN_FAILURE"
    REGISTER_START = "REGISTER_START"
    REGISTER_SUCCESS = "REGISTER_SUCCESS"
    REGISTER_FAILURE = "REGISTER_FAILURE"
    LOGOUT = "LOGOUT"
    UPDATE_USER = "UPDATE_USER"
    CLEAR_ERROR = "CLEAR_ERROR"


@dataclass(frozen=True)
class SessionState:
    user: Optional[Dict[str, Any]] = None
    role: Optional[str] = None
    token: Optional[str] = None
    is_loading: bool = False
    error: Optional[str] = None

    @property
    def status(self) -> AuthStatus:
        if self.token is not None:
            return AuthStatus.AUTHENTICATED
        if self.is_loading:
            return AuthStatus.AUTHENTICATING
        return AuthStatus.ANONYMOUS

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None


def session_reducer(state: SessionState, action: Action) -> SessionState:
    """Pure transition function for the session store."""
    kind = action.type

    if kind in (SessionAction.LOGIN_START, SessionAction.REGISTER_START):
        return replace(state, is_loading=True, error=None)

    if kind == SessionAction.LOGIN_SUCCESS:
        return SessionState(
            user=action.payload["user"],
            role=action.payload["role"],
            token=action.payload["token"],
        )

    if kind == SessionAction.LOGIN_FAILURE:
        return SessionState(error=action.payload)

    if kind == SessionAction.REGISTER_SUCCESS:
        return replace(state, is_loading=False, error=None)

    if kind == SessionAction.REGISTER_FAILURE:
        return replace(state, is_loading=False, error=action.payload)

    if kind == SessionAction.LOGOUT:
        return SessionState()

    if kind == SessionAction.UPDATE_USER:
        if state.token is None:
            # A user without a token would break the invariant
            return state
        return replace(state, user=action.payload, is_loading=False, error=None)

    if kind == SessionAction.CLEAR_ERROR:
        return replace(state, error=None)

    return state


class SessionStore(Store[SessionState]):
    """
    Session store seeded from, and mirrored to, durable storage.

    Every transition that changes user, token or role is written through the
    mirror before dispatch returns, so storage and the snapshot never
    disagree once control is back with the caller.
    """

    def __init__(
        self,
        auth_service: AuthService,
        mirror: SessionMirror,
        notifier: Optional[Notifier] = None
    ):
        self.auth_service = auth_service
        self.mirror = mirror
        self.notifier = notifier or LogNotifier()

        # Each field is seeded on its own; a torn mirror seeds a torn state
        user, role, token = mirror.load()
        super().__init__(session_reducer, SessionState(user=user, role=role, token=token))

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated

    def _on_commit(self, previous: SessionState, current: SessionState) -> None:
        if (
            previous.user != current.user
            or previous.token != current.token
            or previous.role != current.role
        ):
            self.mirror.sync(current)

    def login(self, credentials: Dict[str, Any]) -> Envelope:
        """
        Log in and store the returned user, role and token.

        Returns:
            Success() or Failure(message); never raises
        """
        self.dispatch(SessionAction.LOGIN_START)

        try:
            result = self.auth_service.login(credentials)
        except Exception as e:
            return self._login_failed(str(e))

        if not result.success:
            return self._login_failed(result.message)

        if not (result.token and result.role and result.data):
            return self._login_failed("Login response is missing credentials")

        self.dispatch(SessionAction.LOGIN_SUCCESS, {
            "user": result.data,
            "role": result.role,
            "token": result.token,
        })
        logger.info("login_succeeded", role=result.role)
        self.notifier.success(result.message or "Login successful")
        return Success()

    def register(self, user_data: Dict[str, Any]) -> Envelope:
        """
        Create an account. Does not log the new user in.

        Returns:
            Success() or Failure(message); never raises
        """
        self.dispatch(SessionAction.REGISTER_START)

        try:
            result = self.auth_service.register(user_data)
        except Exception as e:
            result = Failure(message=str(e) or "Registration failed")

        if not result.success:
            message = result.message or "Registration failed"
            self.dispatch(SessionAction.REGISTER_FAILURE, message)
            self.notifier.error(message)
            return Failure(message=message)

        self.dispatch(SessionAction.REGISTER_SUCCESS)
        self.notifier.success(result.message or "Registration successful")
        return Success()

    def logout(self) -> None:
        """Forget the session. Safe to call when already logged out."""
        self.mirror.clear()
        self.dispatch(SessionAction.LOGOUT)
        logger.info("logout")
        self.notifier.success("Logout successful")

    def update_user(self, user_data: Dict[str, Any]) -> None:
        """Replace the cached profile (e.g. after a profile edit)."""
        self.dispatch(SessionAction.UPDATE_USER, user_data)

    def clear_error(self) -> None:
        self.dispatch(SessionAction.CLEAR_ERROR)

    def _login_failed(self, message: Optional[str]) -> Failure:
        message = message or "Login failed"
        self.dispatch(SessionAction.LOGIN_FAILURE, message)
        logger.info("login_failed", reason=message)
        self.notifier.error(message)
        return Failure(message=message)
