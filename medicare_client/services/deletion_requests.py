"""Account deletion request endpoints."""
from typing import Any, Dict, Optional

from medicare_client.envelope import Envelope
from medicare_client.services.base import BaseService, never_raises


class DeletionRequestService(BaseService):
    """Users file deletion requests; admins approve or reject them."""

    @never_raises("Failed to submit deletion request. Please try again.")
    def create(self, request_data: Dict[str, Any]) -> Envelope:
        """
        Args:
            request_data: {"reason": "..."}
        """
        return self.client.post("/deletion-requests", request_data)

    @never_raises("Failed to get deletion request status. Please try again.")
    def get_status(self) -> Envelope:
        """Status of the current user's pending request, if any."""
        return self.client.get("/deletion-requests/status")

    @never_raises("Failed to fetch deletion requests. Please try again.")
    def get_all(self) -> Envelope:
        return self.client.get("/deletion-requests")

    @never_raises("Failed to process deletion request. Please try again.")
    def process(self, request_id: str, status: str, admin_notes: Optional[str] = None) -> Envelope:
        """
        Approve or reject a request (admin only).

        Args:
            request_id: Deletion request ID
            status: "approved" or "rejected"
            admin_notes: Optional note shown to the user
        """
        return self.client.put(
            f"/deletion-requests/{request_id}",
            {"status": status, "adminNotes": admin_notes or ""}
        )
