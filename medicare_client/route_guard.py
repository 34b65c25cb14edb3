"""Navigation-time authorization for protected views.

`authorize` is a pure decision function; `RouteGuard` feeds it the current
session snapshot on every call and never caches a decision.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from medicare_client.logging_config import get_logger

logger = get_logger(__name__)

LOGIN_PATH = "/login"
HOME_PATH = "/"

# Path prefix -> roles allowed to view it. Unlisted paths are public.
PROTECTED_ROUTES: Dict[str, Tuple[str, ...]] = {
    "/profile": ("patient",),
    "/doctor/profile": ("doctor",),
    "/admin": ("admin",),
}


class RouteAction(str, Enum):
    RENDER = "render"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class RouteDecision:
    action: RouteAction
    location: str

    @property
    def allowed(self) -> bool:
        return self.action == RouteAction.RENDER


def authorize(
    token: Optional[str],
    context_role: Optional[str],
    stored_role: Optional[str],
    requested_path: str,
    allowed_roles: Optional[Iterable[str]] = None
) -> RouteDecision:
    """
    Decide whether a protected view may render.

    Args:
        token: Bearer token from the session, or None
        context_role: Role held by the session store
        stored_role: Role read from durable storage; preferred when set
        requested_path: Path being navigated to
        allowed_roles: Roles permitted on this view; None admits any
                       authenticated user

    Returns:
        RENDER at requested_path, or REDIRECT to the login or home view

    Example:
        >>> authorize(None, None, None, "/admin", ["admin"]).location
        '/login'
    """
    effective_role = stored_role or context_role

    if not token:
        return RouteDecision(RouteAction.REDIRECT, LOGIN_PATH)

    if allowed_roles is not None and effective_role not in tuple(allowed_roles):
        return RouteDecision(RouteAction.REDIRECT, HOME_PATH)

    return RouteDecision(RouteAction.RENDER, requested_path)


def allowed_roles_for(
    path: str,
    routes: Dict[str, Tuple[str, ...]] = PROTECTED_ROUTES
) -> Optional[Tuple[str, ...]]:
    """
    Look up the allow-list for a path by longest matching prefix.

    Returns:
        Tuple of roles, or None when the path is public
    """
    best = None
    for prefix in routes:
        if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
            if best is None or len(prefix) > len(best):
                best = prefix
    return routes[best] if best is not None else None


class RouteGuard:
    """
    Route guard bound to a session store.

    The store writes its mirror synchronously inside dispatch, so its
    snapshot and the stored role agree by the time a navigation is checked;
    the stored role is still passed through as the preferred source.
    """

    def __init__(self, session_store, routes: Optional[Dict[str, Tuple[str, ...]]] = None):
        self.session_store = session_store
        self.routes = PROTECTED_ROUTES if routes is None else routes

    def check(self, path: str) -> RouteDecision:
        """Evaluate a navigation to `path` against the current session."""
        allowed = allowed_roles_for(path, self.routes)
        if allowed is None:
            return RouteDecision(RouteAction.RENDER, path)

        state = self.session_store.state
        decision = authorize(
            token=state.token,
            context_role=state.role,
            stored_role=self.session_store.mirror.read_role(),
            requested_path=path,
            allowed_roles=allowed,
        )

        if not decision.allowed:
            logger.info(
                "navigation_redirected",
                path=path,
                location=decision.location,
                role=state.role
            )
        return decision
