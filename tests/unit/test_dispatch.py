from __future__ import annotations

import asyncio
import logging

import pytest
import orjson
from fakes import FakeWebSocket, RecordingHandler, v2_frame, webhook_frame

from stripe_listener.state import EventAck
from stripe_listener.handlers import EventHandler, send_ack, encode_ack, dispatch_message, parse_inbound_message


class _Acks:
    def __init__(self) -> None:
        self.acks: list[EventAck] = []

    async def __call__(self, ack: EventAck) -> bool:
        self.acks.append(ack)
        return True


@pytest.mark.asyncio
async def test_webhook_event_is_acked_before_callback() -> None:
    acks = _Acks()
    order: list[str] = []

    class _Handler(EventHandler):
        def on_webhook_event(self, event, parsed) -> None:
            order.append(f"callback:{len(acks.acks)}")

    await dispatch_message(parse_inbound_message(webhook_frame()), _Handler(), acks)

    assert acks.acks == [EventAck(event_id="evt_1", webhook_conversation_id="wc_1", webhook_id="we_1")]
    assert order == ["callback:1"]


@pytest.mark.asyncio
async def test_v2_event_ack_uses_destination_as_webhook_id() -> None:
    acks = _Acks()
    handler = RecordingHandler()

    await dispatch_message(parse_inbound_message(v2_frame(destination_id="ed_7")), handler, acks)

    assert acks.acks == [EventAck(event_id="evt_v2_1", webhook_conversation_id="", webhook_id="ed_7")]
    assert handler.calls[0][0] == "v2_event"


@pytest.mark.asyncio
async def test_unknown_message_is_not_acked() -> None:
    acks = _Acks()
    handler = RecordingHandler()
    raw = b'{"type":"ping_custom"}'

    await dispatch_message(parse_inbound_message(raw), handler, acks)

    assert acks.acks == []
    assert handler.calls == [("unknown", ("ping_custom", raw), 0)]


@pytest.mark.asyncio
async def test_unparseable_payload_still_acks_with_empty_id() -> None:
    acks = _Acks()
    handler = RecordingHandler()

    await dispatch_message(parse_inbound_message(webhook_frame(event_payload="oops")), handler, acks)

    assert acks.acks[0].event_id == ""
    assert handler.calls[0][1].id == ""


@pytest.mark.asyncio
async def test_async_hooks_are_awaited() -> None:
    seen = asyncio.Event()

    class _Handler(EventHandler):
        async def on_webhook_event(self, event, parsed) -> None:
            await asyncio.sleep(0)
            seen.set()

    await dispatch_message(parse_inbound_message(webhook_frame()), _Handler(), _Acks())
    assert seen.is_set()


@pytest.mark.asyncio
async def test_handler_exception_is_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    class _Handler(EventHandler):
        def on_webhook_event(self, event, parsed) -> None:
            raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        await dispatch_message(parse_inbound_message(webhook_frame()), _Handler(), _Acks())

    assert "webhook_event handler failed" in caplog.text


@pytest.mark.asyncio
async def test_send_ack_writes_json() -> None:
    ws = FakeWebSocket(close_after=False)
    ack = EventAck(event_id="evt_1", webhook_conversation_id="wc_1", webhook_id="we_1")

    ok = await send_ack(ws, asyncio.Lock(), ack, write_wait_s=0.5)

    assert ok is True
    assert orjson.loads(ws.sent[0]) == {
        "type": "event_ack",
        "event_id": "evt_1",
        "webhook_conversation_id": "wc_1",
        "webhook_id": "we_1",
    }
    assert ws.sent[0] == encode_ack(ack)


@pytest.mark.asyncio
async def test_send_ack_failure_returns_false(caplog: pytest.LogCaptureFixture) -> None:
    ws = FakeWebSocket(close_after=False, fail_send=True)
    ack = EventAck(event_id="evt_1", webhook_conversation_id="wc_1", webhook_id="we_1")

    with caplog.at_level(logging.WARNING):
        ok = await send_ack(ws, asyncio.Lock(), ack, write_wait_s=0.5)

    assert ok is False
    assert "ack send failed for evt_1" in caplog.text


@pytest.mark.asyncio
async def test_send_ack_waits_for_write_lock_within_bound() -> None:
    ws = FakeWebSocket(close_after=False)
    lock = asyncio.Lock()
    ack = EventAck(event_id="evt_1", webhook_conversation_id="", webhook_id="")

    async with lock:
        ok = await send_ack(ws, lock, ack, write_wait_s=0.05)

    assert ok is False
    assert ws.sent == []
