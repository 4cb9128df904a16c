# ABOUTME: Placeholder session handling: a token file whose presence means "logged in".
# ABOUTME: No credentials are checked; this only gates the CLI behind an explicit login.

import logging
from pathlib import Path

from libris.config import DEFAULT_TOKEN_PATH

logger = logging.getLogger(__name__)

PLACEHOLDER_TOKEN = "dummy-token"


class SessionStore:
    """Reads and writes the session token file."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or DEFAULT_TOKEN_PATH

    @property
    def path(self) -> Path:
        return self._path

    def token(self) -> str | None:
        """Return the stored token, or None if there is none."""
        try:
            text = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return text or None

    def is_authenticated(self) -> bool:
        return self.token() is not None

    def login(self, token: str = PLACEHOLDER_TOKEN) -> None:
        """Store a session token, replacing any existing one."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(token, encoding="utf-8")
        logger.debug("Session token written to %s", self._path)

    def logout(self) -> bool:
        """Remove the session token. Returns False if there was none."""
        try:
            self._path.unlink()
        except FileNotFoundError:
            return False
        return True
