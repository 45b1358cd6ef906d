"""Read loop: receive, decode, ack and dispatch frames in arrival order."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from websockets.exceptions import ConnectionClosed

from stripe_listener.errors import ReadError, FrameDecodeError
from stripe_listener.config.websocket import WS_CLOSE_NORMAL_CODE

from .deadline import ReadDeadline
from .event_handler import EventHandler
from .parser import parse_inbound_message
from .dispatch import AckSender, dispatch_message

logger = logging.getLogger(__name__)


async def _recv_before_deadline(ws: Any, deadline: ReadDeadline) -> str | bytes:
    while True:
        remaining = deadline.remaining()
        if remaining <= 0:
            raise TimeoutError
        try:
            async with asyncio.timeout(remaining):
                return await ws.recv()
        except TimeoutError:
            # A pong may have moved the deadline while we were waiting.
            if not deadline.expired():
                continue
            raise


def _is_normal_closure(exc: ConnectionClosed) -> bool:
    return exc.rcvd is not None and exc.rcvd.code == WS_CLOSE_NORMAL_CODE


async def run_read_loop(
    ws: Any,
    *,
    deadline: ReadDeadline,
    halt: asyncio.Event,
    handler: EventHandler,
    send_ack: AckSender,
    log: logging.Logger | None = None,
) -> None:
    """Run until the peer closes normally or `halt` is set.

    Raises ReadError on a read deadline miss or any other receive failure.
    Malformed frames are logged and skipped.
    """
    log = log or logger
    while True:
        deadline.touch()
        try:
            raw = await _recv_before_deadline(ws, deadline)
        except ConnectionClosed as exc:
            if halt.is_set() or _is_normal_closure(exc):
                log.info("websocket closed: %s", exc)
                return
            raise ReadError(f"read: {exc}") from exc
        except TimeoutError as exc:
            if halt.is_set():
                return
            raise ReadError(f"read: no frame or pong within {deadline.window_s:.1f}s") from exc
        except Exception as exc:
            if halt.is_set():
                return
            raise ReadError(f"read: {exc}") from exc

        try:
            envelope = parse_inbound_message(raw)
        except FrameDecodeError as exc:
            log.warning("dropping malformed message: %s", exc)
            continue

        log.debug("received %s", envelope.raw_type or "<untyped>")
        await dispatch_message(envelope, handler, send_ack, log=log)


__all__ = ["run_read_loop"]
