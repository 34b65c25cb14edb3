"""Review store.

Unlike appointments, the current review follows mutations: a successful
update makes the returned review current and a delete clears it.
The one-review-per-doctor rule lives on the backend; its rejection shows up
as an ordinary create failure.
"""
from typing import Any, Dict, Optional, Tuple

from medicare_client.envelope import Envelope, Failure
from medicare_client.notifications import Notifier
from medicare_client.services.reviews import ReviewService
from medicare_client.stores.resources import ResourceStore


class ReviewStore(ResourceStore):
    resource_name = "Review"
    current_follows_mutations = True

    def __init__(self, service: ReviewService, notifier: Optional[Notifier] = None):
        self.service = service
        super().__init__(notifier)

    @property
    def reviews(self) -> Tuple[Dict[str, Any], ...]:
        return self.state.items

    @property
    def current_review(self) -> Optional[Dict[str, Any]]:
        return self.state.current

    def fetch_doctor_reviews(self, doctor_id: str) -> Envelope:
        return self.fetch_collection(doctor_id)

    def _fetch(self, owner_id: Optional[str]) -> Envelope:
        if owner_id is None:
            return Failure(message="A doctor id is required to fetch reviews")
        return self.service.get_doctor_reviews(owner_id)

    def _create(self, data: Dict[str, Any]) -> Envelope:
        return self.service.create(data)

    def _update(self, item_id: str, data: Dict[str, Any]) -> Envelope:
        return self.service.update(item_id, data)

    def _delete(self, item_id: str) -> Envelope:
        return self.service.delete(item_id)
