"""Process-wide credential store.

Credentials are unset until configured, normally once at startup. Readers get
an immutable snapshot, so a configure() racing with in-flight requests never
exposes a half-updated key/secret pair.
"""

from __future__ import annotations

import threading
from typing import Optional

from .models import Credentials


class CredentialStore:
    """Holds the API key and secret read by every signed request."""

    def __init__(self, key: Optional[str] = None, secret: Optional[str] = None):
        self._lock = threading.Lock()
        self._credentials = Credentials(key=key, secret=secret)

    def configure(self, key: Optional[str] = None, secret: Optional[str] = None) -> Credentials:
        """Replace the held credentials and return the new snapshot."""
        credentials = Credentials(key=key, secret=secret)
        with self._lock:
            self._credentials = credentials
        return credentials

    def current(self) -> Credentials:
        with self._lock:
            return self._credentials

    def reset(self) -> None:
        self.configure()


default_store = CredentialStore()


def configure(key: Optional[str] = None, secret: Optional[str] = None) -> Credentials:
    """Set the process-wide API key and secret."""
    return default_store.configure(key=key, secret=secret)


def get_credentials() -> Credentials:
    return default_store.current()


def reset() -> None:
    default_store.reset()
