"""Result envelopes returned by every HTTP, service and store call.

Exactly two shapes exist above the HTTP client:
- Success: payload in `data`, auth endpoints also carry `token` and `role`
- Failure: human-readable `message`, optional HTTP `status`

The backend's loose `{success, message, data}` bodies (including the
legacy `status` flag some endpoints send instead of `success`) are folded
into these two types by `from_payload`.
"""
from typing import Any, Optional, Union, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ERROR_MESSAGE = "An error occurred"


class Success(BaseModel):
    """Successful call."""
    success: Literal[True] = True
    data: Any = None
    message: Optional[str] = None
    status: Optional[int] = Field(None, description="HTTP status code, when known")
    token: Optional[str] = Field(None, description="Bearer token (login only)")
    role: Optional[str] = Field(None, description="Account role (login only)")
    requires_approval: bool = Field(
        default=False,
        description="Set on account deletions that wait for an admin decision"
    )

    model_config = ConfigDict(frozen=True)


class Failure(BaseModel):
    """Failed call: transport, HTTP or application error."""
    success: Literal[False] = False
    message: str = DEFAULT_ERROR_MESSAGE
    status: Optional[int] = None
    data: None = None

    model_config = ConfigDict(frozen=True)


Envelope = Union[Success, Failure]


def _is_successful(payload: dict) -> bool:
    if "success" in payload:
        return bool(payload["success"])
    if "status" in payload:
        # Legacy login responses use `status` instead of `success`
        return bool(payload["status"])
    return True


def from_payload(payload: Any, status: Optional[int] = None) -> Envelope:
    """
    Convert a decoded 2xx response body into an envelope.

    Args:
        payload: Decoded JSON body (any type)
        status: HTTP status code of the response

    Returns:
        Success or Failure

    Example:
        >>> from_payload({"success": True, "data": [1, 2]}, 200).data
        [1, 2]
    """
    if not isinstance(payload, dict):
        return Success(data=payload, status=status)

    message = payload.get("message")
    if not _is_successful(payload):
        return Failure(message=message or DEFAULT_ERROR_MESSAGE, status=status)

    return Success(
        data=payload.get("data"),
        message=message,
        status=status,
        token=payload.get("token"),
        role=payload.get("role"),
    )
