"""Doctor discovery and doctor profile endpoints."""
from typing import Any, Dict
from urllib.parse import urlencode

from medicare_client.envelope import Envelope, Success
from medicare_client.services.base import BaseService, never_raises, to_form_fields


class DoctorService(BaseService):
    """Public listing (no auth) plus profile management for doctors."""

    @never_raises("Failed to fetch doctors. Please try again.")
    def get_all(self, query: str = "") -> Envelope:
        """
        List approved doctors, optionally filtered by a search query.

        Args:
            query: Free-text search (name or specialization)
        """
        path = f"/doctors?{urlencode({'query': query})}" if query else "/doctors"
        return self.client.get(path, auth_required=False)

    @never_raises("Failed to fetch doctor. Please try again.")
    def get_by_id(self, doctor_id: str) -> Envelope:
        return self.client.get(f"/doctors/{doctor_id}", auth_required=False)

    @never_raises("Failed to fetch top rated doctors. Please try again.")
    def get_top_rated(self, limit: int = 6) -> Envelope:
        params = urlencode({"sort": "-averageRating", "limit": limit})
        return self.client.get(f"/doctors?{params}", auth_required=False)

    @never_raises("Failed to update doctor. Please try again.")
    def update(self, doctor_id: str, doctor_data: Dict[str, Any]) -> Envelope:
        """
        Update a doctor profile (multipart).

        List fields such as qualifications, experiences and timeSlots are
        JSON-encoded before upload.
        """
        return self.client.put(
            f"/doctors/{doctor_id}",
            to_form_fields(doctor_data),
            multipart=True
        )

    @never_raises("Failed to delete doctor account. Please try again.")
    def delete(self, doctor_id: str) -> Envelope:
        result = self.client.delete(f"/doctors/{doctor_id}")
        if isinstance(result, Success):
            return result.model_copy(update={"requires_approval": True})
        return result
