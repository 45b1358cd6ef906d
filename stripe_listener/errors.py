"""Error types raised by the listener."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ListenerError(Exception):
    """Base class for every error the listener surfaces."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class AuthError(ListenerError):
    """Session authorization failed (non-2xx, transport or decode failure)."""

    status_code: int | None = None
    body: str = ""

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code}): {self.body}"


@dataclass(eq=False)
class ConnectError(ListenerError):
    """WebSocket dial or upgrade failed."""


@dataclass(eq=False)
class PreconditionError(ListenerError):
    """A lifecycle step was called out of order."""


@dataclass(eq=False)
class FrameDecodeError(ListenerError, ValueError):
    """An inbound frame could not be decoded into a known envelope."""


@dataclass(eq=False)
class ReadError(ListenerError):
    """The read loop failed; the connection is unusable."""


@dataclass(eq=False)
class WriteError(ListenerError):
    """A keepalive write failed; the connection is unusable."""


@dataclass(eq=False)
class ListenCancelled(ListenerError):
    """Listening stopped because the caller signalled stop."""

    message: str = "listen cancelled"


__all__ = [
    "AuthError",
    "ConnectError",
    "FrameDecodeError",
    "ListenCancelled",
    "ListenerError",
    "PreconditionError",
    "ReadError",
    "WriteError",
]
