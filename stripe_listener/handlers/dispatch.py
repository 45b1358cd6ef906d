"""Dispatch decoded envelopes to the event handler."""

from __future__ import annotations

import inspect
import logging
from typing import Any
from collections.abc import Callable, Awaitable

from stripe_listener.state import V2Event, EventAck, WebhookEvent, UnknownMessage, InboundEnvelope

from .event_handler import EventHandler
from .parser import parse_v2_payload, parse_event_payload

logger = logging.getLogger(__name__)

AckSender = Callable[[EventAck], Awaitable[bool]]
HandlerFn = Callable[[Any, EventHandler, AckSender, logging.Logger], Awaitable[None]]


async def _invoke(log: logging.Logger, label: str, hook: Callable[..., Any], *args: Any) -> None:
    try:
        result = hook(*args)
        if inspect.isawaitable(result):
            await result
    except Exception:
        log.exception("%s handler failed", label)


async def _handle_webhook_event(
    event: WebhookEvent,
    handler: EventHandler,
    send_ack: AckSender,
    log: logging.Logger,
) -> None:
    parsed = parse_event_payload(event.event_payload, log=log)
    await send_ack(
        EventAck(
            event_id=parsed.id,
            webhook_conversation_id=event.webhook_conversation_id,
            webhook_id=event.webhook_id,
        )
    )
    await _invoke(log, "webhook_event", handler.on_webhook_event, event, parsed)


async def _handle_v2_event(
    event: V2Event,
    handler: EventHandler,
    send_ack: AckSender,
    log: logging.Logger,
) -> None:
    parsed = parse_v2_payload(event.payload, log=log)
    # v2 events have no conversation; the destination stands in for the webhook id.
    await send_ack(EventAck(event_id=parsed.id, webhook_conversation_id="", webhook_id=event.destination_id))
    await _invoke(log, "v2_event", handler.on_v2_event, event, parsed)


async def _handle_unknown(
    message: UnknownMessage,
    handler: EventHandler,
    _send_ack: AckSender,
    log: logging.Logger,
) -> None:
    await _invoke(log, "unknown message", handler.on_unknown_message, message.raw_type, message.data)


HANDLERS: dict[type, HandlerFn] = {
    WebhookEvent: _handle_webhook_event,
    V2Event: _handle_v2_event,
    UnknownMessage: _handle_unknown,
}


async def dispatch_message(
    envelope: InboundEnvelope,
    handler: EventHandler,
    send_ack: AckSender,
    *,
    log: logging.Logger | None = None,
) -> None:
    """Ack (for events) and then hand the envelope to the matching hook."""
    log = log or logger
    handle = HANDLERS.get(type(envelope.message))
    if handle is None:
        raise TypeError(f"no handler for {type(envelope.message).__name__}")
    await handle(envelope.message, handler, send_ack, log)


__all__ = ["HANDLERS", "dispatch_message"]
