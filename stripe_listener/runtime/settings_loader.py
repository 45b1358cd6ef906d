"""Environment parsing for listener settings."""

from __future__ import annotations

import os
from collections.abc import Iterable

from stripe_listener.state.settings import ListenerSettings
from stripe_listener.config.secrets import ENV_STRIPE_API_KEY
from stripe_listener.config.api import (
    ENV_STRIPE_API_BASE,
    DEFAULT_STRIPE_API_BASE,
    ENV_STRIPE_HTTP_TIMEOUT_S,
    DEFAULT_STRIPE_HTTP_TIMEOUT_S,
)
from stripe_listener.config.listener import (
    ENV_STRIPE_DEVICE_NAME,
    DEFAULT_STRIPE_DEVICE_NAME,
    ENV_STRIPE_WEBSOCKET_FEATURES,
    DEFAULT_STRIPE_WEBSOCKET_FEATURES,
)
from stripe_listener.config.websocket import (
    ENV_WS_PONG_WAIT_S,
    ENV_WS_WRITE_WAIT_S,
    ENV_WS_CLOSE_GRACE_S,
    ENV_WS_PING_PERIOD_S,
    WS_PING_PERIOD_RATIO,
    DEFAULT_WS_PONG_WAIT_S,
    DEFAULT_WS_WRITE_WAIT_S,
    DEFAULT_WS_CLOSE_GRACE_S,
    ENV_WS_HANDSHAKE_TIMEOUT_S,
    DEFAULT_WS_HANDSHAKE_TIMEOUT_S,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _float_env(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except Exception:
        return default
    return value if value > 0 else default


def _list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    items = tuple(item.strip() for item in raw.split(",") if item.strip())
    return items or default


def derive_ping_period(pong_wait_s: float) -> float:
    return pong_wait_s * WS_PING_PERIOD_RATIO


def build_settings(
    api_key: str,
    *,
    device_name: str | None = None,
    websocket_features: Iterable[str] | None = None,
    api_base: str | None = None,
    pong_wait_s: float | None = None,
    ping_period_s: float | None = None,
    write_wait_s: float | None = None,
    handshake_timeout_s: float | None = None,
    close_grace_s: float | None = None,
    http_timeout_s: float | None = None,
) -> ListenerSettings:
    """Fill unset values with defaults.

    An explicit ping period wins; otherwise it is derived from the pong wait.
    """
    features = tuple(websocket_features) if websocket_features else DEFAULT_STRIPE_WEBSOCKET_FEATURES
    pong_wait = float(pong_wait_s) if pong_wait_s else DEFAULT_WS_PONG_WAIT_S
    ping_period = float(ping_period_s) if ping_period_s else derive_ping_period(pong_wait)
    return ListenerSettings(
        api_key=api_key,
        device_name=device_name or DEFAULT_STRIPE_DEVICE_NAME,
        websocket_features=features,
        api_base=(api_base or DEFAULT_STRIPE_API_BASE).rstrip("/"),
        pong_wait_s=pong_wait,
        ping_period_s=ping_period,
        write_wait_s=float(write_wait_s) if write_wait_s else DEFAULT_WS_WRITE_WAIT_S,
        handshake_timeout_s=float(handshake_timeout_s) if handshake_timeout_s else DEFAULT_WS_HANDSHAKE_TIMEOUT_S,
        close_grace_s=float(close_grace_s) if close_grace_s else DEFAULT_WS_CLOSE_GRACE_S,
        http_timeout_s=float(http_timeout_s) if http_timeout_s else DEFAULT_STRIPE_HTTP_TIMEOUT_S,
    )


def load_settings(api_key: str | None = None) -> ListenerSettings:
    return build_settings(
        api_key if api_key is not None else (os.getenv(ENV_STRIPE_API_KEY) or "").strip(),
        device_name=_str_env(ENV_STRIPE_DEVICE_NAME, DEFAULT_STRIPE_DEVICE_NAME),
        websocket_features=_list_env(ENV_STRIPE_WEBSOCKET_FEATURES, DEFAULT_STRIPE_WEBSOCKET_FEATURES),
        api_base=_str_env(ENV_STRIPE_API_BASE, DEFAULT_STRIPE_API_BASE),
        pong_wait_s=_float_env(ENV_WS_PONG_WAIT_S, DEFAULT_WS_PONG_WAIT_S),
        ping_period_s=_float_env(ENV_WS_PING_PERIOD_S, None),
        write_wait_s=_float_env(ENV_WS_WRITE_WAIT_S, DEFAULT_WS_WRITE_WAIT_S),
        handshake_timeout_s=_float_env(ENV_WS_HANDSHAKE_TIMEOUT_S, DEFAULT_WS_HANDSHAKE_TIMEOUT_S),
        close_grace_s=_float_env(ENV_WS_CLOSE_GRACE_S, DEFAULT_WS_CLOSE_GRACE_S),
        http_timeout_s=_float_env(ENV_STRIPE_HTTP_TIMEOUT_S, DEFAULT_STRIPE_HTTP_TIMEOUT_S),
    )


__all__ = ["build_settings", "derive_ping_period", "load_settings"]
