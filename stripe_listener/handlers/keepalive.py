"""Ping loop that keeps the session socket alive."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

from stripe_listener.errors import WriteError

from .deadline import ReadDeadline

logger = logging.getLogger(__name__)


class KeepaliveLoop:
    """Sends a ping every period and extends the read deadline on each pong.

    A ping that cannot be written within the write wait ends the loop with
    WriteError. The loop also ends quietly once `halt` is set.
    """

    def __init__(
        self,
        websocket: Any,
        *,
        write_lock: asyncio.Lock,
        deadline: ReadDeadline,
        halt: asyncio.Event,
        ping_period_s: float,
        write_wait_s: float,
        log: logging.Logger | None = None,
    ) -> None:
        self._ws = websocket
        self._write_lock = write_lock
        self._deadline = deadline
        self._halt = halt
        self._ping_period_s = float(ping_period_s)
        self._write_wait_s = float(write_wait_s)
        self._log = log or logger
        self._task: asyncio.Task | None = None

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self._ping_loop())
        return self._task

    async def stop(self) -> None:
        self._halt.set()
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await self._task
        self._task = None

    async def _ping_loop(self) -> None:
        while not self._halt.is_set():
            await asyncio.sleep(self._ping_period_s)
            if self._halt.is_set():
                break
            await self._send_ping()

    async def _send_ping(self) -> None:
        try:
            async with asyncio.timeout(self._write_wait_s):
                async with self._write_lock:
                    pong_waiter = await self._ws.ping()
        except Exception as exc:
            if self._halt.is_set():
                return
            detail = str(exc) or f"{type(exc).__name__} after {self._write_wait_s:.1f}s"
            raise WriteError(f"ping: {detail}") from exc
        pong_waiter.add_done_callback(self._on_pong)
        self._log.debug("ping sent")

    def _on_pong(self, waiter: asyncio.Future) -> None:
        if waiter.cancelled() or waiter.exception() is not None:
            return
        self._deadline.touch()
        self._log.debug("pong received")


__all__ = ["KeepaliveLoop"]
