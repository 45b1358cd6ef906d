"""Stream Stripe events over the Stripe CLI session socket."""

from .listener import Listener
from .handlers import EventHandler
from .runtime import load_settings, build_settings, configure_logging
from .errors import (
    AuthError,
    ReadError,
    WriteError,
    ConnectError,
    ListenerError,
    ListenCancelled,
    FrameDecodeError,
    PreconditionError,
)
from .state import (
    V2Event,
    EventAck,
    Session,
    WebhookEvent,
    UnknownMessage,
    V2EventPayload,
    InboundEnvelope,
    ListenerSettings,
    StripeEventPayload,
)

__all__ = [
    "AuthError",
    "ConnectError",
    "EventAck",
    "EventHandler",
    "FrameDecodeError",
    "InboundEnvelope",
    "ListenCancelled",
    "Listener",
    "ListenerError",
    "ListenerSettings",
    "PreconditionError",
    "ReadError",
    "Session",
    "StripeEventPayload",
    "UnknownMessage",
    "V2Event",
    "V2EventPayload",
    "WebhookEvent",
    "WriteError",
    "build_settings",
    "configure_logging",
    "load_settings",
]
