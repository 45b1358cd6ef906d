"""WebSocket dial helpers."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlparse, urlencode, urlunparse

import websockets
from websockets.typing import Subprotocol
from websockets.exceptions import InvalidStatus, WebSocketException

from stripe_listener.errors import ConnectError
from stripe_listener.config.api import USER_AGENT
from stripe_listener.state import Session, ListenerSettings
from stripe_listener.config.websocket import (
    WS_SUBPROTOCOL,
    WS_FEATURE_QUERY_KEY,
    WS_MAX_MESSAGE_BYTES,
    WS_HEADER_WEBSOCKET_ID,
)

from .headers import build_headers

logger = logging.getLogger(__name__)


def build_ws_url(session: Session) -> str:
    """Append the authorized feature to the session's socket URL."""
    parsed = urlparse(session.websocket_url)
    feature = urlencode({WS_FEATURE_QUERY_KEY: session.websocket_authorized_feature})
    # The server-issued query is kept byte-for-byte, repeated keys included.
    new_query = f"{parsed.query}&{feature}" if parsed.query else feature
    return urlunparse((parsed.scheme, parsed.netloc, parsed.path, parsed.params, new_query, parsed.fragment))


def get_ws_options(session: Session, settings: ListenerSettings) -> dict[str, Any]:
    # websockets writes its own User-Agent header; hand it ours instead of duplicating.
    headers = build_headers(include_user_agent=False)
    headers[WS_HEADER_WEBSOCKET_ID] = session.websocket_id
    return {
        "additional_headers": list(headers.items()),
        "user_agent_header": USER_AGENT,
        "subprotocols": [Subprotocol(WS_SUBPROTOCOL)],
        "open_timeout": settings.handshake_timeout_s,
        "close_timeout": settings.close_grace_s,
        # Keepalive runs in KeepaliveLoop.
        "ping_interval": None,
        "ping_timeout": None,
        "max_size": WS_MAX_MESSAGE_BYTES,
    }


def _describe_rejection(exc: InvalidStatus) -> str:
    body = exc.response.body or b""
    text = body.decode("utf-8", errors="replace").strip()
    return f"websocket dial: {exc} | {text}" if text else f"websocket dial: {exc}"


async def open_connection(
    session: Session,
    settings: ListenerSettings,
    *,
    log: logging.Logger | None = None,
) -> Any:
    log = log or logger
    url = build_ws_url(session)
    log.debug("dialing %s", url)
    try:
        ws = await websockets.connect(url, **get_ws_options(session, settings))
    except InvalidStatus as exc:
        raise ConnectError(_describe_rejection(exc)) from exc
    except (OSError, TimeoutError, WebSocketException) as exc:
        raise ConnectError(f"websocket dial: {exc}") from exc
    log.info("websocket connected")
    return ws


__all__ = ["build_ws_url", "get_ws_options", "open_connection"]
