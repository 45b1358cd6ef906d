"""Close helpers for the session socket."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from stripe_listener.config.websocket import WS_CLOSE_NORMAL_CODE, WS_CLOSE_NORMAL_REASON

logger = logging.getLogger(__name__)


async def close_ws_gracefully(ws: Any, *, grace_s: float, write_wait_s: float) -> None:
    """Send close 1000 "done", wait out the grace period, then drop the transport."""
    try:
        async with asyncio.timeout(grace_s + write_wait_s):
            await ws.close(code=WS_CLOSE_NORMAL_CODE, reason=WS_CLOSE_NORMAL_REASON)
    except Exception:
        logger.debug("close handshake did not complete; aborting transport", exc_info=True)
        transport = getattr(ws, "transport", None)
        if transport is not None:
            transport.abort()


__all__ = ["close_ws_gracefully"]
