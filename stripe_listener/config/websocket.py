"""WebSocket protocol configuration and constants."""

from __future__ import annotations

# Envelope keys
WS_KEY_TYPE = "type"
WS_KEY_ENDPOINT = "endpoint"
WS_KEY_API_VERSION = "api_version"
WS_KEY_EVENT_PAYLOAD = "event_payload"
WS_KEY_PAYLOAD = "payload"
WS_KEY_HTTP_HEADERS = "http_headers"
WS_KEY_CONVERSATION_ID = "webhook_conversation_id"
WS_KEY_WEBHOOK_ID = "webhook_id"
WS_KEY_DESTINATION_ID = "destination_id"
WS_KEY_EVENT_ID = "event_id"

# Message types
WS_TYPE_WEBHOOK_EVENT = "webhook_event"
WS_TYPE_V2_EVENT = "v2_event"
WS_TYPE_EVENT_ACK = "event_ack"

# Dial parameters
WS_SUBPROTOCOL = "stripecli-devproxy-v1"
WS_FEATURE_QUERY_KEY = "websocket_feature"
WS_HEADER_WEBSOCKET_ID = "Websocket-Id"

# Close codes
WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_NORMAL_REASON = "done"

# Timing (seconds)
ENV_WS_PONG_WAIT_S = "STRIPE_WS_PONG_WAIT_S"
ENV_WS_PING_PERIOD_S = "STRIPE_WS_PING_PERIOD_S"
ENV_WS_WRITE_WAIT_S = "STRIPE_WS_WRITE_WAIT_S"
ENV_WS_HANDSHAKE_TIMEOUT_S = "STRIPE_WS_HANDSHAKE_TIMEOUT_S"
ENV_WS_CLOSE_GRACE_S = "STRIPE_WS_CLOSE_GRACE_S"

DEFAULT_WS_PONG_WAIT_S = 10.0
DEFAULT_WS_WRITE_WAIT_S = 1.0
DEFAULT_WS_HANDSHAKE_TIMEOUT_S = 10.0
DEFAULT_WS_CLOSE_GRACE_S = 0.5

# Ping period defaults to a fraction of the pong wait (10s -> 2s).
WS_PING_PERIOD_RATIO = 0.2

# Upper bound on a single inbound frame (bytes).
WS_MAX_MESSAGE_BYTES = 16 * 1024 * 1024

__all__ = [
    "DEFAULT_WS_CLOSE_GRACE_S",
    "DEFAULT_WS_HANDSHAKE_TIMEOUT_S",
    "DEFAULT_WS_PONG_WAIT_S",
    "DEFAULT_WS_WRITE_WAIT_S",
    "ENV_WS_CLOSE_GRACE_S",
    "ENV_WS_HANDSHAKE_TIMEOUT_S",
    "ENV_WS_PING_PERIOD_S",
    "ENV_WS_PONG_WAIT_S",
    "ENV_WS_WRITE_WAIT_S",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_NORMAL_REASON",
    "WS_FEATURE_QUERY_KEY",
    "WS_HEADER_WEBSOCKET_ID",
    "WS_KEY_API_VERSION",
    "WS_KEY_CONVERSATION_ID",
    "WS_KEY_DESTINATION_ID",
    "WS_KEY_ENDPOINT",
    "WS_KEY_EVENT_ID",
    "WS_KEY_EVENT_PAYLOAD",
    "WS_KEY_HTTP_HEADERS",
    "WS_KEY_PAYLOAD",
    "WS_KEY_TYPE",
    "WS_KEY_WEBHOOK_ID",
    "WS_MAX_MESSAGE_BYTES",
    "WS_PING_PERIOD_RATIO",
    "WS_SUBPROTOCOL",
    "WS_TYPE_EVENT_ACK",
    "WS_TYPE_V2_EVENT",
    "WS_TYPE_WEBHOOK_EVENT",
]
