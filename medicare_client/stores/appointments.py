"""Appointment store.

`current_appointment` is not refreshed by status updates: after
`update_status` the list entry is replaced but the detail view must call
`set_current` again if it shows the same appointment.
"""
from typing import Any, Dict, Optional, Tuple

from medicare_client.envelope import Envelope
from medicare_client.notifications import Notifier
from medicare_client.services.appointments import AppointmentService
from medicare_client.stores.resources import ResourceStore


class AppointmentStore(ResourceStore):
    resource_name = "Appointment"
    current_follows_mutations = False

    def __init__(self, service: AppointmentService, notifier: Optional[Notifier] = None):
        self.service = service
        super().__init__(notifier)

    @property
    def appointments(self) -> Tuple[Dict[str, Any], ...]:
        return self.state.items

    @property
    def current_appointment(self) -> Optional[Dict[str, Any]]:
        return self.state.current

    def fetch_patient_appointments(self) -> Envelope:
        return self.fetch_collection()

    def fetch_doctor_appointments(self, doctor_id: str) -> Envelope:
        return self.fetch_collection(doctor_id)

    def update_status(self, appointment_id: str, patch: Dict[str, Any]) -> Envelope:
        """
        Change an appointment's status.

        Args:
            appointment_id: Appointment `_id`
            patch: {"status": "confirmed" | "cancelled" | "completed"}
        """
        return self.update(appointment_id, patch)

    def _fetch(self, owner_id: Optional[str]) -> Envelope:
        # No owner: the logged-in patient's own appointments
        if owner_id is None:
            return self.service.get_patient_appointments()
        return self.service.get_doctor_appointments(owner_id)

    def _create(self, data: Dict[str, Any]) -> Envelope:
        return self.service.create(data)

    def _update(self, item_id: str, data: Dict[str, Any]) -> Envelope:
        return self.service.update_status(item_id, data)

    def _delete(self, item_id: str) -> Envelope:
        return self.service.delete(item_id)
