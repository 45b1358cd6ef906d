"""Event acknowledgment writes."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import orjson

from stripe_listener.state import EventAck

logger = logging.getLogger(__name__)


def encode_ack(ack: EventAck) -> str:
    return orjson.dumps(ack.to_dict()).decode("utf-8")


async def send_ack(
    ws: Any,
    write_lock: asyncio.Lock,
    ack: EventAck,
    *,
    write_wait_s: float,
    log: logging.Logger | None = None,
) -> bool:
    """Best-effort ack write; failures are logged and reported as False."""
    text = encode_ack(ack)
    try:
        async with asyncio.timeout(write_wait_s):
            async with write_lock:
                await ws.send(text)
    except Exception as exc:
        (log or logger).warning("ack send failed for %s: %s", ack.event_id, str(exc) or type(exc).__name__)
        return False
    return True


__all__ = ["encode_ack", "send_ack"]
