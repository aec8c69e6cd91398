"""
Persisted bearer token storage.
"""
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class TokenStore(Protocol):
    def get(self) -> Optional[str]: ...

    def set(self, token: str) -> None: ...

    def remove(self) -> None: ...


class MemoryTokenStore:
    """Token kept for the lifetime of the process."""

    def __init__(self, token: Optional[str] = None):
        self._token = token or None

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def remove(self) -> None:
        self._token = None


class FileTokenStore:
    """Token persisted to a private file between runs."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def get(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(token)
        logger.debug("Token saved to %s", self.path)

    def remove(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
