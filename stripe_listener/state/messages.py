"""Inbound envelopes and outbound acknowledgments (dataclasses only)."""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass

from stripe_listener.config.websocket import (
    WS_KEY_TYPE,
    WS_KEY_EVENT_ID,
    WS_KEY_WEBHOOK_ID,
    WS_TYPE_EVENT_ACK,
    WS_KEY_CONVERSATION_ID,
)


@dataclass(frozen=True, slots=True)
class WebhookEndpoint:
    api_version: str | None = None


@dataclass(frozen=True, slots=True)
class WebhookEvent:
    """A v1 webhook event pushed over the socket."""

    endpoint: WebhookEndpoint
    event_payload: str
    http_headers: dict[str, str]
    webhook_conversation_id: str
    webhook_id: str


@dataclass(frozen=True, slots=True)
class V2Event:
    """A v2 thin event pushed over the socket."""

    payload: str
    http_headers: dict[str, str]
    destination_id: str


@dataclass(frozen=True, slots=True)
class UnknownMessage:
    raw_type: str
    data: bytes


InboundMessage = WebhookEvent | V2Event | UnknownMessage


@dataclass(frozen=True, slots=True)
class InboundEnvelope:
    """One decoded frame; the raw bytes and type travel with the variant."""

    raw_type: str
    raw: bytes
    message: InboundMessage


@dataclass(slots=True)
class StripeEventPayload:
    """Parsed contents of `WebhookEvent.event_payload`."""

    id: str = ""
    type: str = ""
    created: int = 0
    livemode: bool = False
    api_version: str = ""
    pending_webhooks: int = 0
    data: dict[str, Any] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class V2EventPayload:
    """Parsed contents of `V2Event.payload`."""

    id: str = ""
    type: str = ""
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class EventAck:
    event_id: str
    webhook_conversation_id: str
    webhook_id: str
    type: str = WS_TYPE_EVENT_ACK

    def to_dict(self) -> dict[str, str]:
        return {
            WS_KEY_TYPE: self.type,
            WS_KEY_EVENT_ID: self.event_id,
            WS_KEY_CONVERSATION_ID: self.webhook_conversation_id,
            WS_KEY_WEBHOOK_ID: self.webhook_id,
        }


__all__ = [
    "EventAck",
    "InboundEnvelope",
    "InboundMessage",
    "StripeEventPayload",
    "UnknownMessage",
    "V2Event",
    "V2EventPayload",
    "WebhookEndpoint",
    "WebhookEvent",
]
