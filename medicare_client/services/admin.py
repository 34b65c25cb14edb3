"""Admin console endpoints. All require an admin bearer token."""
from typing import Any, Dict

from medicare_client.envelope import Envelope
from medicare_client.services.base import BaseService, never_raises


class AdminService(BaseService):

    @never_raises("Failed to fetch dashboard statistics. Please try again.")
    def get_dashboard_stats(self) -> Envelope:
        return self.client.get("/admin/dashboard")

    @never_raises("Failed to fetch doctors. Please try again.")
    def get_all_doctors(self) -> Envelope:
        """All doctors, including those pending approval."""
        return self.client.get("/admin/doctors")

    @never_raises("Failed to update doctor status. Please try again.")
    def update_doctor_status(self, doctor_id: str, status_data: Dict[str, Any]) -> Envelope:
        """
        Args:
            status_data: {"isApproved": "approved" | "pending" | "cancelled"}
        """
        return self.client.put(f"/admin/doctors/{doctor_id}/status", status_data)

    @never_raises("Failed to delete doctor. Please try again.")
    def delete_doctor(self, doctor_id: str) -> Envelope:
        return self.client.delete(f"/admin/doctors/{doctor_id}")

    @never_raises("Failed to fetch users. Please try again.")
    def get_all_users(self) -> Envelope:
        return self.client.get("/admin/users")

    @never_raises("Failed to delete user. Please try again.")
    def delete_user(self, user_id: str) -> Envelope:
        return self.client.delete(f"/admin/users/{user_id}")

    @never_raises("Failed to fetch appointments. Please try again.")
    def get_all_appointments(self) -> Envelope:
        return self.client.get("/admin/appointments")

    @never_raises("Failed to update appointment status. Please try again.")
    def update_appointment_status(self, appointment_id: str, status: str) -> Envelope:
        return self.client.put(f"/admin/appointments/{appointment_id}/status", {"status": status})

    @never_raises("Failed to delete appointment. Please try again.")
    def delete_appointment(self, appointment_id: str) -> Envelope:
        return self.client.delete(f"/admin/appointments/{appointment_id}")
