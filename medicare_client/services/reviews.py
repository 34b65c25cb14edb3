"""Review endpoints.

The backend allows one review per user per doctor; a second create comes
back as a Failure carrying the server's message.
"""
from typing import Any, Dict

from medicare_client.envelope import Envelope
from medicare_client.services.base import BaseService, never_raises


class ReviewService(BaseService):

    @never_raises("Failed to create review. Please try again.")
    def create(self, review_data: Dict[str, Any]) -> Envelope:
        return self.client.post("/reviews", review_data)

    @never_raises("Failed to fetch reviews. Please try again.")
    def get_doctor_reviews(self, doctor_id: str) -> Envelope:
        return self.client.get(f"/doctors/{doctor_id}/reviews", auth_required=False)

    @never_raises("Failed to update review. Please try again.")
    def update(self, review_id: str, review_data: Dict[str, Any]) -> Envelope:
        return self.client.put(f"/reviews/{review_id}", review_data)

    @never_raises("Failed to delete review. Please try again.")
    def delete(self, review_id: str) -> Envelope:
        return self.client.delete(f"/reviews/{review_id}")
