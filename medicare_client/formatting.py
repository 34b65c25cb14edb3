"""Display helpers for server data."""
from datetime import datetime
from typing import Optional

from medicare_client import config

DATE_DISPLAY_FORMAT = "{month} {day}, {year}"


def format_doctor_name(name: Optional[str]) -> str:
    """Prefix "Dr." unless the name already starts with it (any case)."""
    if not name:
        return ""
    if name.lower().startswith("dr."):
        return name
    return f"Dr. {name}"


def _display(value: datetime) -> str:
    return DATE_DISPLAY_FORMAT.format(month=value.strftime("%b"), day=value.day, year=value.year)


def format_date(value: str) -> str:
    """
    Format a date string as e.g. "Jan 5, 2025".

    Accepts ISO 8601 dates/datetimes (a trailing "Z" included) and
    MM-DD-YYYY. Anything else is returned unchanged.
    """
    try:
        return _display(datetime.fromisoformat(value.replace("Z", "+00:00")))
    except (AttributeError, ValueError):
        pass

    parts = value.split("-") if isinstance(value, str) else []
    if len(parts) == 3:
        try:
            month, day, year = (int(part) for part in parts)
            return _display(datetime(year, month, day))
        except ValueError:
            pass

    return value


def get_image_url(
    image_url: Optional[str],
    fallback_url: str = config.DEFAULT_AVATAR,
    server_url: str = config.API_SERVER_URL
) -> str:
    """
    Resolve an image URL for display.

    Empty values fall back to the default avatar; paths under /uploads/ are
    served by the API server and get its origin prefixed.
    """
    if not image_url:
        return fallback_url
    if image_url.startswith("/uploads/"):
        return f"{server_url.rstrip('/')}{image_url}"
    return image_url
