"""User-visible notifications (toasts) raised by store actions."""
from typing import List, Protocol, Tuple

from medicare_client.logging_config import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    """Anything that can show a transient success or error message."""

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LogNotifier:
    """Default notifier: writes notifications to the structured log."""

    def success(self, message: str) -> None:
        logger.info("notification", kind="success", message=message)

    def error(self, message: str) -> None:
        logger.warning("notification", kind="error", message=message)


class RecordingNotifier:
    """Keeps notifications in memory, newest last. Useful for headless callers."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    @property
    def errors(self) -> List[str]:
        return [text for level, text in self.messages if level == "error"]

    @property
    def successes(self) -> List[str]:
        return [text for level, text in self.messages if level == "success"]
