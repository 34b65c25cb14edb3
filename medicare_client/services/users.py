"""User profile endpoints."""
from typing import Any, Dict

from medicare_client.envelope import Envelope, Success
from medicare_client.services.base import BaseService, never_raises, to_form_fields


class UserService(BaseService):

    @never_raises("Failed to fetch user profile. Please try again.")
    def get_profile(self, user_id: str) -> Envelope:
        return self.client.get(f"/users/{user_id}")

    @never_raises("Failed to update user profile. Please try again.")
    def update_profile(self, user_id: str, user_data: Dict[str, Any]) -> Envelope:
        """Update a profile. Always multipart so a new photo can ride along."""
        return self.client.put(
            f"/users/{user_id}",
            to_form_fields(user_data),
            multipart=True
        )

    @never_raises("Failed to delete user profile. Please try again.")
    def delete_profile(self, user_id: str) -> Envelope:
        """Request account deletion; an admin must approve it."""
        result = self.client.delete(f"/users/{user_id}")
        if isinstance(result, Success):
            return result.model_copy(update={"requires_approval": True})
        return result

    @never_raises("Failed to update password. Please try again.")
    def update_password(self, password_data: Dict[str, Any]) -> Envelope:
        """
        Change the current user's password.

        Args:
            password_data: {"currentPassword": ..., "newPassword": ...}
        """
        return self.client.put("/password", password_data)
