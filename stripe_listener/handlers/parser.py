"""Inbound frame parsing for the Stripe CLI socket protocol."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable

import orjson

from stripe_listener.errors import FrameDecodeError
from stripe_listener.state import (
    V2Event,
    WebhookEvent,
    InboundMessage,
    UnknownMessage,
    V2EventPayload,
    InboundEnvelope,
    WebhookEndpoint,
    StripeEventPayload,
)
from stripe_listener.config.websocket import (
    WS_KEY_TYPE,
    WS_KEY_PAYLOAD,
    WS_KEY_ENDPOINT,
    WS_KEY_WEBHOOK_ID,
    WS_TYPE_V2_EVENT,
    WS_KEY_API_VERSION,
    WS_KEY_HTTP_HEADERS,
    WS_KEY_EVENT_PAYLOAD,
    WS_KEY_DESTINATION_ID,
    WS_TYPE_WEBHOOK_EVENT,
    WS_KEY_CONVERSATION_ID,
)

logger = logging.getLogger(__name__)

DecoderFn = Callable[[dict[str, Any]], InboundMessage]


def _str_field(msg: dict[str, Any], key: str) -> str:
    value = msg.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise FrameDecodeError(f"field '{key}' must be a string")
    return value


def _headers_field(msg: dict[str, Any]) -> dict[str, str]:
    value = msg.get(WS_KEY_HTTP_HEADERS)
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        raise FrameDecodeError(f"field '{WS_KEY_HTTP_HEADERS}' must map strings to strings")
    return dict(value)


def _decode_webhook_event(msg: dict[str, Any]) -> WebhookEvent:
    endpoint = msg.get(WS_KEY_ENDPOINT)
    if endpoint is None:
        endpoint = {}
    if not isinstance(endpoint, dict):
        raise FrameDecodeError(f"field '{WS_KEY_ENDPOINT}' must be an object")
    api_version = endpoint.get(WS_KEY_API_VERSION)
    if api_version is not None and not isinstance(api_version, str):
        raise FrameDecodeError(f"field '{WS_KEY_ENDPOINT}.{WS_KEY_API_VERSION}' must be a string")

    return WebhookEvent(
        endpoint=WebhookEndpoint(api_version=api_version),
        event_payload=_str_field(msg, WS_KEY_EVENT_PAYLOAD),
        http_headers=_headers_field(msg),
        webhook_conversation_id=_str_field(msg, WS_KEY_CONVERSATION_ID),
        webhook_id=_str_field(msg, WS_KEY_WEBHOOK_ID),
    )


def _decode_v2_event(msg: dict[str, Any]) -> V2Event:
    return V2Event(
        payload=_str_field(msg, WS_KEY_PAYLOAD),
        http_headers=_headers_field(msg),
        destination_id=_str_field(msg, WS_KEY_DESTINATION_ID),
    )


DECODERS: dict[str, DecoderFn] = {
    WS_TYPE_WEBHOOK_EVENT: _decode_webhook_event,
    WS_TYPE_V2_EVENT: _decode_v2_event,
}


def parse_inbound_message(raw: str | bytes) -> InboundEnvelope:
    """Peek at `type`, then decode the matching variant.

    Raises FrameDecodeError when the frame is not a JSON object, the type is not
    a string, or a known variant carries fields of the wrong type.
    """
    data = raw.encode("utf-8") if isinstance(raw, str) else bytes(raw)
    try:
        msg = orjson.loads(data)
    except orjson.JSONDecodeError as exc:
        raise FrameDecodeError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise FrameDecodeError("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if msg_type is None:
        msg_type = ""
    if not isinstance(msg_type, str):
        raise FrameDecodeError(f"message '{WS_KEY_TYPE}' must be a string")

    decoder = DECODERS.get(msg_type)
    message = decoder(msg) if decoder is not None else UnknownMessage(raw_type=msg_type, data=data)
    return InboundEnvelope(raw_type=msg_type, raw=data, message=message)


def _load_payload(text: str, label: str, log: logging.Logger) -> dict[str, Any] | None:
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError:
        log.warning("could not parse %s", label)
        return None
    if not isinstance(data, dict):
        log.warning("could not parse %s: expected a JSON object", label)
        return None
    return data


def _pick(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    # bool is an int subclass; keep it out of integer fields.
    if isinstance(value, bool) and kind is not bool:
        return default
    return value if isinstance(value, kind) else default


def parse_event_payload(text: str, *, log: logging.Logger | None = None) -> StripeEventPayload:
    data = _load_payload(text, WS_KEY_EVENT_PAYLOAD, log or logger)
    if data is None:
        return StripeEventPayload()
    return StripeEventPayload(
        id=_pick(data, "id", str, ""),
        type=_pick(data, "type", str, ""),
        created=_pick(data, "created", int, 0),
        livemode=_pick(data, "livemode", bool, False),
        api_version=_pick(data, "api_version", str, ""),
        pending_webhooks=_pick(data, "pending_webhooks", int, 0),
        data=_pick(data, "data", dict, {}),
        raw=data,
    )


def parse_v2_payload(text: str, *, log: logging.Logger | None = None) -> V2EventPayload:
    data = _load_payload(text, WS_KEY_PAYLOAD, log or logger)
    if data is None:
        return V2EventPayload()
    return V2EventPayload(
        id=_pick(data, "id", str, ""),
        type=_pick(data, "type", str, ""),
        raw=data,
    )


__all__ = ["DECODERS", "parse_event_payload", "parse_inbound_message", "parse_v2_payload"]
