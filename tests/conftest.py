"""Shared test fixtures."""
import json

import pytest
import requests
from unittest.mock import Mock

from medicare_client.envelope import Failure, Success
from medicare_client.notifications import RecordingNotifier
from medicare_client.session_mirror import SessionMirror
from medicare_client.storage import KeyValueStorage


@pytest.fixture
def storage():
    """KeyValueStorage on an in-memory database."""
    store = KeyValueStorage(database_url="sqlite:///:memory:")
    yield store
    store.close()


@pytest.fixture
def mirror(storage) -> SessionMirror:
    return SessionMirror(storage)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def make_response():
    """Build a real requests.Response with the given status and body."""
    def _create(status_code: int = 200, body=None, content_type: str = "application/json"):
        response = requests.Response()
        response.status_code = status_code
        if content_type:
            response.headers["Content-Type"] = content_type
        if body is None:
            response._content = b""
        elif isinstance(body, (dict, list)):
            response._content = json.dumps(body).encode()
        else:
            response._content = str(body).encode()
        response.encoding = "utf-8"
        return response
    return _create


@pytest.fixture
def patient_login():
    """Success envelope returned by a patient login."""
    return Success(
        data={"_id": "u1", "name": "Jane Patient", "email": "jane@example.com"},
        token="tok-123",
        role="patient",
        message="Login successful",
        status=200,
    )


@pytest.fixture
def mock_auth_service(patient_login):
    service = Mock()
    service.login.return_value = patient_login
    service.register.return_value = Success(message="Registration successful")
    return service


@pytest.fixture
def failing():
    """Failure envelope factory."""
    def _create(message: str = "Something went wrong", status: int = 400):
        return Failure(message=message, status=status)
    return _create
