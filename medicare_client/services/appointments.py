"""Appointment endpoints."""
from typing import Any, Dict

from medicare_client.envelope import Envelope
from medicare_client.services.base import BaseService, never_raises


class AppointmentService(BaseService):

    @never_raises("Failed to create appointment. Please try again.")
    def create(self, appointment_data: Dict[str, Any]) -> Envelope:
        return self.client.post("/appointments", appointment_data)

    @never_raises("Failed to fetch appointments. Please try again.")
    def get_patient_appointments(self) -> Envelope:
        """Appointments of the logged-in patient."""
        return self.client.get("/appointments/patient")

    @never_raises("Failed to fetch appointments. Please try again.")
    def get_doctor_appointments(self, doctor_id: str) -> Envelope:
        return self.client.get(f"/appointments/doctor/{doctor_id}")

    @never_raises("Failed to update appointment status. Please try again.")
    def update_status(self, appointment_id: str, status_data: Dict[str, Any]) -> Envelope:
        """
        Args:
            status_data: {"status": "confirmed" | "cancelled" | "completed"}
        """
        return self.client.put(f"/appointments/{appointment_id}/status", status_data)

    @never_raises("Failed to delete appointment. Please try again.")
    def delete(self, appointment_id: str) -> Envelope:
        return self.client.delete(f"/appointments/{appointment_id}")
