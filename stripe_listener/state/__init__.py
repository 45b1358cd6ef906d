from .session import Session
from .listener import ListenerState
from .settings import ListenerSettings
from .messages import (
    V2Event,
    EventAck,
    WebhookEvent,
    InboundMessage,
    UnknownMessage,
    V2EventPayload,
    InboundEnvelope,
    WebhookEndpoint,
    StripeEventPayload,
)

__all__ = [
    "EventAck",
    "InboundEnvelope",
    "InboundMessage",
    "ListenerSettings",
    "ListenerState",
    "Session",
    "StripeEventPayload",
    "UnknownMessage",
    "V2Event",
    "V2EventPayload",
    "WebhookEndpoint",
    "WebhookEvent",
]
