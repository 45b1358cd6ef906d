"""Listener settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ListenerSettings:
    api_key: str
    device_name: str
    websocket_features: tuple[str, ...]
    api_base: str
    pong_wait_s: float
    ping_period_s: float
    write_wait_s: float
    handshake_timeout_s: float
    close_grace_s: float
    http_timeout_s: float


__all__ = ["ListenerSettings"]
