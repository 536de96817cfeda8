"""Naming rules shared by the registry and the file store.

Client ids are slugs derived from display names; stored filenames carry a
numeric prefix that is unique for the lifetime of the process.
"""

import re
import threading
import time
from pathlib import PurePath

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_WHITESPACE = re.compile(r"\s+")


def slugify_client_name(name: str) -> str:
    """Lowercase ``name`` and collapse non-alphanumeric runs into single hyphens."""
    return _NON_ALNUM.sub("-", name.strip().lower()).strip("-")


def humanize_client_id(client_id: str) -> str:
    """``highway-projects`` → ``Highway Projects``."""
    words = client_id.replace("-", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def normalize_filename(original: str) -> str:
    """Drop directory components and collapse whitespace runs to ``_``."""
    # Browsers on Windows may send backslash-separated paths.
    base = PurePath(original.replace("\\", "/")).name
    return _WHITESPACE.sub("_", base.strip()) or "model"


class StoredNameGenerator:
    """Produces ``<token>-<name>`` filenames with a strictly increasing token.

    The token is the current time in milliseconds, bumped past the previous
    token when two calls land in the same millisecond.
    """

    def __init__(self, clock=None):
        self._clock = clock or (lambda: time.time_ns() // 1_000_000)
        self._last = 0
        self._lock = threading.Lock()

    def next_token(self) -> int:
        with self._lock:
            token = max(int(self._clock()), self._last + 1)
            self._last = token
            return token

    def stored_name(self, original: str) -> str:
        return f"{self.next_token()}-{normalize_filename(original)}"


# Shared by every store in the process so prefixes never repeat.
default_name_generator = StoredNameGenerator()
