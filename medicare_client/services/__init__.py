"""Domain services, one per backend resource."""
from medicare_client.services.admin import AdminService
from medicare_client.services.appointments import AppointmentService
from medicare_client.services.auth import AuthService
from medicare_client.services.deletion_requests import DeletionRequestService
from medicare_client.services.doctors import DoctorService
from medicare_client.services.reviews import ReviewService
from medicare_client.services.users import UserService

__all__ = [
    "AdminService",
    "AppointmentService",
    "AuthService",
    "DeletionRequestService",
    "DoctorService",
    "ReviewService",
    "UserService",
]
