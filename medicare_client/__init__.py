"""Python client for the Medicare doctor-appointment booking API."""
from medicare_client.client import MedicareClient
from medicare_client.config import Settings, load_settings
from medicare_client.envelope import Envelope, Failure, Success

__all__ = [
    "Envelope",
    "Failure",
    "MedicareClient",
    "Settings",
    "Success",
    "load_settings",
]

__version__ = "1.0.0"
