"""Sliding read deadline shared by the read loop and the keepalive."""

from __future__ import annotations

import time
from collections.abc import Callable


class ReadDeadline:
    """Tracks when the connection is considered dead.

    The read loop resets it before every read and the keepalive resets it on
    every pong, so either inbound frames or pongs keep the connection alive.
    """

    def __init__(self, window_s: float, *, now_fn: Callable[[], float] | None = None) -> None:
        self._window_s = float(window_s)
        self._now_fn = now_fn or time.monotonic
        self._expires_at = self._now_fn() + self._window_s

    @property
    def window_s(self) -> float:
        return self._window_s

    def touch(self) -> None:
        self._expires_at = self._now_fn() + self._window_s

    def remaining(self) -> float:
        return max(0.0, self._expires_at - self._now_fn())

    def expired(self) -> bool:
        return self.remaining() <= 0.0


__all__ = ["ReadDeadline"]
