"""Listener: authorize, connect, and stream events until stopped."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

import httpx

from stripe_listener.state import EventAck, Session, ListenerState, ListenerSettings
from stripe_listener.errors import ListenCancelled, PreconditionError
from stripe_listener.runtime import build_settings
from stripe_listener.transport import authorize, open_connection
from stripe_listener.handlers import (
    EventHandler,
    KeepaliveLoop,
    ReadDeadline,
    send_ack,
    run_read_loop,
    close_ws_gracefully,
)


class Listener:
    """Streams Stripe events to an EventHandler over one session socket.

    Usage: ``await Listener(settings, handler).listen_all(stop)``. Each event is
    acknowledged before the handler sees it. Nothing reconnects: once `listen`
    returns or raises, build a new session to keep going.
    """

    def __init__(
        self,
        settings: ListenerSettings | str,
        handler: EventHandler,
        *,
        logger: logging.Logger | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = build_settings(settings) if isinstance(settings, str) else settings
        self._handler = handler
        self._log = logger or logging.getLogger(__name__)
        self._http_client = http_client
        self._state = ListenerState()

    @property
    def settings(self) -> ListenerSettings:
        return self._settings

    @property
    def session(self) -> Session | None:
        return self._state.session

    @property
    def connected(self) -> bool:
        return self._state.ws is not None

    async def authorize(self) -> Session:
        if self._http_client is not None:
            session = await authorize(self._http_client, self._settings, log=self._log)
        else:
            async with httpx.AsyncClient(timeout=self._settings.http_timeout_s) as client:
                session = await authorize(client, self._settings, log=self._log)
        self._state.session = session
        return session

    async def connect(self) -> None:
        if self._state.session is None:
            raise PreconditionError("connect called before authorize")
        self._state.ws = await open_connection(self._state.session, self._settings, log=self._log)

    async def listen(self, stop: asyncio.Event | None = None) -> None:
        """Read and keep alive until the peer closes, a loop fails, or `stop` is set.

        Returns None on a normal peer close. Raises ListenCancelled when `stop`
        wins, or the ReadError/WriteError that ended a loop.
        """
        ws = self._state.ws
        if ws is None:
            raise PreconditionError("listen called before connect")

        if stop is None:
            stop = asyncio.Event()
        halt = asyncio.Event()
        settings = self._settings
        deadline = ReadDeadline(settings.pong_wait_s)
        keepalive = KeepaliveLoop(
            ws,
            write_lock=self._state.write_lock,
            deadline=deadline,
            halt=halt,
            ping_period_s=settings.ping_period_s,
            write_wait_s=settings.write_wait_s,
            log=self._log,
        )

        read_task = asyncio.create_task(
            run_read_loop(
                ws,
                deadline=deadline,
                halt=halt,
                handler=self._handler,
                send_ack=self._send_ack,
                log=self._log,
            )
        )
        ping_task = keepalive.start()
        stop_task = asyncio.create_task(stop.wait())

        try:
            done, _pending = await asyncio.wait(
                {read_task, ping_task, stop_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            halt.set()
            await keepalive.stop()
            for task in (read_task, stop_task):
                await self._cancel_task(task)
            await close_ws_gracefully(ws, grace_s=settings.close_grace_s, write_wait_s=settings.write_wait_s)
            self._state.ws = None

        if stop_task in done:
            self._log.info("listener stopped")
            raise ListenCancelled()
        for task in (read_task, ping_task):
            if task not in done or task.cancelled():
                continue
            exc = task.exception()
            if exc is not None:
                self._log.error("listener failed: %s", exc)
                raise exc
        self._log.info("listener finished")

    async def listen_all(self, stop: asyncio.Event | None = None) -> None:
        await self.authorize()
        await self.connect()
        await self.listen(stop)

    async def _send_ack(self, ack: EventAck) -> bool:
        ws = self._state.ws
        if ws is None:
            return False
        return await send_ack(
            ws,
            self._state.write_lock,
            ack,
            write_wait_s=self._settings.write_wait_s,
            log=self._log,
        )

    @staticmethod
    async def _cancel_task(task: asyncio.Task[Any]) -> None:
        if not task.done():
            task.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await task


__all__ = ["Listener"]
