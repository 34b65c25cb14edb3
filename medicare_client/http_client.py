"""HTTP client for the Medicare REST API.

Purpose: The only component that performs network I/O. Every call resolves
to a Success or Failure envelope; transport exceptions never escape.

Pattern: requests.Session with connection pooling, one envelope normalizer.

Notes:
- No automatic retries: a failed request ends the caller's action
- No client-side timeout unless one is configured
- No cancellation of in-flight requests
"""
import json
from typing import Any, Callable, Dict, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter

from medicare_client.envelope import (
    DEFAULT_ERROR_MESSAGE,
    Envelope,
    Failure,
    Success,
    from_payload,
)
from medicare_client.logging_config import generate_request_id, get_logger, request_context

logger = get_logger(__name__)

TokenProvider = Callable[[], Optional[str]]


def create_http_session(pool_size: int = 10) -> requests.Session:
    """
    Create HTTP session with connection pooling and retries disabled.

    Args:
        pool_size: Connections kept per host (default: 10)

    Returns:
        Configured requests.Session
    """
    session = requests.Session()

    adapter = HTTPAdapter(
        max_retries=0,
        pool_connections=pool_size,
        pool_maxsize=pool_size,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    return session


def _is_file(value: Any) -> bool:
    return hasattr(value, "read") or isinstance(value, (bytes, tuple))


def split_multipart(body: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Split a multipart body into form fields and file parts.

    File-like objects, bytes and (filename, content[, type]) tuples become
    file parts; everything else is sent as a form field. A body with no
    file parts is sent as (None, value) parts so it still goes out as
    multipart/form-data.

    Returns:
        Tuple of (data, files) for requests
    """
    data, files = {}, {}
    for key, value in (body or {}).items():
        if _is_file(value):
            files[key] = value
        else:
            data[key] = value

    if not files:
        # requests urlencodes a body that has no file parts
        files = {key: (None, str(value)) for key, value in data.items()}
        data = {}
    return data, files


class HttpClient:
    """
    Envelope-returning wrapper around requests.

    Args:
        base_url: API root, e.g. https://host/api/v1
        token_provider: Called on every authenticated request for the
                        current bearer token
        session: Optional pre-built requests.Session
        timeout: Optional per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider
        self.session = session or create_http_session()
        self.timeout = timeout

    def get(self, path: str, auth_required: bool = True) -> Envelope:
        return self.request("GET", path, auth_required=auth_required)

    def post(
        self,
        path: str,
        body: Any = None,
        auth_required: bool = True,
        multipart: bool = False
    ) -> Envelope:
        return self.request("POST", path, body, auth_required, multipart)

    def put(
        self,
        path: str,
        body: Any = None,
        auth_required: bool = True,
        multipart: bool = False
    ) -> Envelope:
        return self.request("PUT", path, body, auth_required, multipart)

    def delete(self, path: str, auth_required: bool = True) -> Envelope:
        return self.request("DELETE", path, auth_required=auth_required)

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        auth_required: bool = True,
        multipart: bool = False
    ) -> Envelope:
        """
        Perform a request and normalize the outcome.

        Args:
            method: GET, POST, PUT or DELETE
            path: Endpoint path relative to base_url
            body: JSON-serializable body, or field dict when multipart
            auth_required: Attach the bearer token when one is available
            multipart: Send body as multipart/form-data

        Returns:
            Success or Failure envelope

        Raises:
            ValueError: If the HTTP method is not supported
        """
        method = method.upper()
        if method not in ("GET", "POST", "PUT", "DELETE"):
            raise ValueError(f"Unsupported HTTP method: {method}")

        request_id = generate_request_id()
        kwargs = {
            "headers": self._headers(auth_required, multipart, request_id),
            "timeout": self.timeout,
        }
        url = f"{self.base_url}{path}"
        with request_context(request_id, method=method, path=path):
            try:
                if method in ("POST", "PUT"):
                    if multipart:
                        kwargs["data"], kwargs["files"] = split_multipart(body)
                    else:
                        kwargs["data"] = json.dumps(body)
                response = self.session.request(method, url, **kwargs)
                result = self._handle_response(response)
            except (requests.exceptions.RequestException, TypeError, ValueError) as e:
                logger.error("http_request_failed", error=str(e))
                return Failure(message=str(e) or DEFAULT_ERROR_MESSAGE, status=500)

            logger.info("http_request", status=response.status_code, success=result.success)
        return result

    def close(self) -> None:
        self.session.close()

    def _headers(self, auth_required: bool, multipart: bool, request_id: str) -> Dict[str, str]:
        headers = {"X-Request-ID": request_id}

        if not multipart:
            headers["Content-Type"] = "application/json"

        if auth_required:
            token = self.token_provider()
            if token:
                headers["Authorization"] = f"Bearer {token}"

        return headers

    @staticmethod
    def _handle_response(response: requests.Response) -> Envelope:
        content_type = response.headers.get("content-type", "")

        if "application/json" in content_type:
            payload = response.json()
            if not response.ok:
                message = payload.get("message") if isinstance(payload, dict) else None
                return Failure(
                    message=message or DEFAULT_ERROR_MESSAGE,
                    status=response.status_code
                )
            return from_payload(payload, response.status_code)

        text = response.text
        if not response.ok:
            return Failure(message=text or DEFAULT_ERROR_MESSAGE, status=response.status_code)

        try:
            payload = json.loads(text)
        except ValueError:
            return Success(data=text, message=text, status=response.status_code)

        return from_payload(payload, response.status_code)
