"""Composition root for the Medicare client.

Builds every component in dependency order and owns their lifecycle:

    storage -> mirror -> HTTP client -> services -> stores -> route guard

The session store is created before anything can navigate or issue an
authenticated request, so the first read always sees rehydrated state.
"""
from typing import Optional

import requests

from medicare_client.config import Settings, load_settings
from medicare_client.http_client import HttpClient
from medicare_client.logging_config import get_logger, setup_structured_logging
from medicare_client.notifications import LogNotifier, Notifier
from medicare_client.route_guard import RouteGuard
from medicare_client.services import (
    AdminService,
    AppointmentService,
    AuthService,
    DeletionRequestService,
    DoctorService,
    ReviewService,
    UserService,
)
from medicare_client.session_mirror import SessionMirror
from medicare_client.storage import KeyValueStorage
from medicare_client.stores import AppointmentStore, ReviewStore, SessionStore

logger = get_logger(__name__)


class MedicareClient:
    """
    One fully wired client instance.

    Usage:
        with MedicareClient() as app:
            app.session.login({"email": "...", "password": "..."})
            app.appointments.fetch_collection()

    Args:
        settings: Runtime settings (default: load_settings())
        notifier: Receives user-visible notifications (default: LogNotifier)
        http_session: Optional pre-built requests.Session
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        notifier: Optional[Notifier] = None,
        http_session: Optional[requests.Session] = None
    ):
        self.settings = settings or load_settings()
        setup_structured_logging(self.settings.log_level)
        self.notifier = notifier or LogNotifier()

        self.storage = KeyValueStorage(self.settings.storage_url)
        self.mirror = SessionMirror(self.storage)
        self.http = HttpClient(
            self.settings.api_base_url,
            token_provider=self.mirror.read_token,
            session=http_session,
            timeout=self.settings.request_timeout,
        )

        self.auth_service = AuthService(self.http)
        self.users = UserService(self.http)
        self.doctors = DoctorService(self.http)
        self.appointment_service = AppointmentService(self.http)
        self.review_service = ReviewService(self.http)
        self.admin = AdminService(self.http)
        self.deletion_requests = DeletionRequestService(self.http)

        self.session = SessionStore(self.auth_service, self.mirror, self.notifier)
        self.appointments = AppointmentStore(self.appointment_service, self.notifier)
        self.reviews = ReviewStore(self.review_service, self.notifier)
        self.guard = RouteGuard(self.session)

        self._closed = False
        logger.info(
            "client_started",
            api_base_url=self.settings.api_base_url,
            authenticated=self.session.is_authenticated
        )

    def close(self) -> None:
        """Release the HTTP connection pool and the storage engine."""
        if self._closed:
            return
        self.http.close()
        self.storage.close()
        self._closed = True
        logger.info("client_closed")

    def __enter__(self) -> "MedicareClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
