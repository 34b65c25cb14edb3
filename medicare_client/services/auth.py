"""Authentication endpoints."""
from typing import Any, Dict

from medicare_client.envelope import Envelope
from medicare_client.services.base import BaseService, never_raises, to_form_fields


class AuthService(BaseService):
    """Registration and login. Neither call needs a bearer token."""

    @never_raises("Registration failed. Please try again.")
    def register(self, user_data: Dict[str, Any]) -> Envelope:
        """
        Register a new patient or doctor account.

        Sent as JSON unless a `photo` is supplied, in which case the whole
        form goes out as multipart. An empty `photo` is dropped.
        """
        if not user_data.get("photo"):
            payload = {k: v for k, v in user_data.items() if k != "photo"}
            return self.client.post("/auth/register", payload, auth_required=False)

        return self.client.post(
            "/auth/register",
            to_form_fields(user_data),
            auth_required=False,
            multipart=True
        )

    @never_raises("Login failed. Please try again.")
    def login(self, credentials: Dict[str, Any]) -> Envelope:
        """
        Exchange credentials for a bearer token.

        The Success envelope carries `token` and `role` at the top level and
        the user profile in `data`. Persisting them is the session store's job.
        """
        return self.client.post("/auth/login", credentials, auth_required=False)
