"""
User-facing notifications with a de-duplication window.
"""
import logging
import time
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

# (level, message) -> None
Sink = Callable[[str, str], None]


class ErrorThrottle:
    """Remembers when each error key was last shown."""

    def __init__(self, window_seconds: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self.window_seconds = window_seconds
        self._clock = clock
        self._last_shown: Dict[str, float] = {}

    def should_show(self, key: str) -> bool:
        last = self._last_shown.get(key)
        if last is None:
            return True
        return self._clock() - last >= self.window_seconds

    def mark(self, key: str) -> None:
        self._last_shown[key] = self._clock()

    def reset(self) -> None:
        self._last_shown.clear()


def log_sink(level: str, message: str) -> None:
    """Default sink: notifications end up in the log."""
    if level == "error":
        logger.error(message)
    elif level == "warning":
        logger.warning(message)
    else:
        logger.info(message)


class Notifier:
    """Routes toast-style messages to a sink."""

    def __init__(self, sink: Optional[Sink] = None, throttle: Optional[ErrorThrottle] = None):
        self.sink = sink or log_sink
        self.throttle = throttle or ErrorThrottle()

    def error(self, message: str) -> None:
        self.sink("error", message)

    def warning(self, message: str) -> None:
        self.sink("warning", message)

    def success(self, message: str) -> None:
        self.sink("success", message)


class RecordingSink:
    """Keeps every notification in memory; handy for embedding and tests."""

    def __init__(self):
        self.messages = []

    def __call__(self, level: str, message: str) -> None:
        self.messages.append((level, message))

    def of_level(self, level: str):
        return [message for lvl, message in self.messages if lvl == level]
