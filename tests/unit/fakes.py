"""In-memory stand-ins for the session endpoint and the session socket."""

from __future__ import annotations

import asyncio
from typing import Any
from collections.abc import Iterable, Callable

import httpx
import orjson
from websockets.frames import Close
from websockets.exceptions import ConnectionClosedOK

from stripe_listener.handlers import EventHandler
from stripe_listener.runtime import build_settings
from stripe_listener.state import V2Event, WebhookEvent, ListenerSettings, V2EventPayload, StripeEventPayload

SESSION_BODY: dict[str, Any] = {
    "reconnect_delay": 5,
    "secret": "whsec_test",
    "websocket_authorized_feature": "webhooks",
    "websocket_id": "ws_123",
    "websocket_url": "wss://stripe-cli.stripe.com/subscribe/acct_1",
    "default_version": "2024-06-20",
    "latest_version": "2025-01-27",
}


def make_settings(**overrides: Any) -> ListenerSettings:
    params: dict[str, Any] = {
        "api_base": "https://api.test",
        "pong_wait_s": 1.0,
        "ping_period_s": 30.0,
        "write_wait_s": 0.2,
        "close_grace_s": 0.05,
    }
    params.update(overrides)
    return build_settings("sk_test_123", **params)


def session_client(
    *,
    status_code: int = 200,
    body: bytes | None = None,
    seen: list[httpx.Request] | None = None,
) -> httpx.AsyncClient:
    content = orjson.dumps(SESSION_BODY) if body is None else body

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, content=content)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def webhook_frame(event_id: str = "evt_1", event_type: str = "charge.succeeded", **fields: Any) -> bytes:
    frame: dict[str, Any] = {
        "type": "webhook_event",
        "endpoint": {"api_version": "2024-06-20"},
        "event_payload": orjson.dumps({"id": event_id, "type": event_type}).decode("utf-8"),
        "http_headers": {"Stripe-Signature": "t=1,v1=abc"},
        "webhook_conversation_id": "wc_1",
        "webhook_id": "we_1",
    }
    frame.update(fields)
    return orjson.dumps(frame)


def v2_frame(event_id: str = "evt_v2_1", destination_id: str = "ed_1") -> bytes:
    return orjson.dumps({
        "type": "v2_event",
        "payload": orjson.dumps({"id": event_id, "type": "v1.billing.meter.error_report_triggered"}).decode("utf-8"),
        "http_headers": {},
        "destination_id": destination_id,
    })


def normal_close() -> ConnectionClosedOK:
    return ConnectionClosedOK(Close(1000, "bye"), None)


class FakeWebSocket:
    def __init__(
        self,
        frames: Iterable[Any] = (),
        *,
        close_after: bool = True,
        pong: bool = True,
        fail_ping: bool = False,
        fail_send: bool = False,
    ) -> None:
        self._inbox: asyncio.Queue[Any] = asyncio.Queue()
        for frame in frames:
            self._inbox.put_nowait(frame)
        if close_after:
            self._inbox.put_nowait(normal_close())
        self.pong = pong
        self.fail_ping = fail_ping
        self.fail_send = fail_send
        self.sent: list[str] = []
        self.pings = 0
        self.close_calls: list[tuple[int, str]] = []

    def feed(self, frame: Any) -> None:
        self._inbox.put_nowait(frame)

    async def recv(self) -> Any:
        item = await self._inbox.get()
        if isinstance(item, BaseException):
            raise item
        return item

    async def send(self, data: str) -> None:
        if self.fail_send:
            raise ConnectionError("send failed")
        self.sent.append(data)

    async def ping(self) -> asyncio.Future:
        if self.fail_ping:
            raise ConnectionError("ping failed")
        self.pings += 1
        waiter = asyncio.get_running_loop().create_future()
        if self.pong:
            waiter.set_result(0.0)
        return waiter

    async def close(self, *, code: int = 1000, reason: str = "") -> None:
        self.close_calls.append((code, reason))


class RecordingHandler(EventHandler):
    """Records every hook call along with how many acks had been sent at that point."""

    def __init__(self, ws: FakeWebSocket | None = None, *, on_event: Callable[[], None] | None = None) -> None:
        self.ws = ws
        self.on_event = on_event
        self.calls: list[tuple[str, Any, int]] = []

    def _record(self, kind: str, value: Any) -> None:
        acks = len(self.ws.sent) if self.ws is not None else 0
        self.calls.append((kind, value, acks))
        if self.on_event is not None:
            self.on_event()

    def on_webhook_event(self, event: WebhookEvent, parsed: StripeEventPayload) -> None:
        self._record("webhook_event", parsed)

    def on_v2_event(self, event: V2Event, parsed: V2EventPayload) -> None:
        self._record("v2_event", parsed)

    def on_unknown_message(self, raw_type: str, data: bytes) -> None:
        self._record("unknown", (raw_type, data))


__all__ = [
    "FakeWebSocket",
    "RecordingHandler",
    "SESSION_BODY",
    "make_settings",
    "normal_close",
    "session_client",
    "v2_frame",
    "webhook_frame",
]
