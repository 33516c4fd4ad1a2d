"""Cache-busting tokens for catalog request URLs."""

from __future__ import annotations

import time
from collections.abc import Callable


class CacheBuster:
    """Generate 13-digit tokens for the ``_`` query parameter.

    The catalog only serves fresh data when ``_`` differs from the previous
    request's value.  Tokens are millisecond UTC timestamps plus a counter
    that is bumped on every call, so two tokens produced within the same
    millisecond still differ.  Not thread-safe.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._increment = 1

    def next_token(self) -> str:
        self._increment += 1
        millis = int(self._clock() * 1000)
        return str(millis + self._increment)
