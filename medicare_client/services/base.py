"""Shared helpers for domain services.

Services are thin: build the endpoint path and body, call the HTTP client,
return its envelope. They hold no state and never raise.
"""
import functools
import json
from typing import Any, Callable, Dict

from medicare_client.envelope import Failure
from medicare_client.http_client import HttpClient
from medicare_client.logging_config import get_logger

logger = get_logger(__name__)


def never_raises(fallback_message: str) -> Callable:
    """
    Decorator: turn any exception raised by a service call into a Failure.

    Args:
        fallback_message: Message returned to the caller on error
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error("service_call_failed", call=func.__qualname__, error=str(e))
                return Failure(message=fallback_message)
        return wrapper
    return decorator


def to_form_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Prepare a dict for multipart upload.

    Lists and dicts are JSON-encoded (the backend parses them back); file-like values
    are kept as-is so they become file parts; None values are dropped.
    """
    fields = {}
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, (list, dict)):
            fields[key] = json.dumps(value)
        elif isinstance(value, bool):
            fields[key] = "true" if value else "false"
        else:
            fields[key] = value
    return fields


class BaseService:
    """Base for services bound to one HTTP client."""

    def __init__(self, client: HttpClient):
        self.client = client
