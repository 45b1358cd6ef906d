"""Stripe API endpoint and client identity constants."""

from __future__ import annotations

ENV_STRIPE_API_BASE = "STRIPE_API_BASE"
ENV_STRIPE_HTTP_TIMEOUT_S = "STRIPE_HTTP_TIMEOUT_S"

DEFAULT_STRIPE_API_BASE = "https://api.stripe.com"
DEFAULT_STRIPE_HTTP_TIMEOUT_S = 30.0

# Session creation endpoint used by `stripe listen`.
SESSION_PATH = "/v1/stripecli/sessions"

# Identity reported to the session endpoint.
CLI_NAME = "stripe-cli"
CLI_VERSION = "1.21.0"
CLI_PUBLISHER = "stripe"
USER_AGENT = f"Stripe/v1 {CLI_NAME}/{CLI_VERSION}"

HEADER_ACCEPT_ENCODING = "Accept-Encoding"
HEADER_USER_AGENT = "User-Agent"
HEADER_CLIENT_USER_AGENT = "X-Stripe-Client-User-Agent"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

FORM_KEY_DEVICE_NAME = "device_name"
FORM_KEY_WEBSOCKET_FEATURES = "websocket_features[]"

__all__ = [
    "CLI_NAME",
    "CLI_PUBLISHER",
    "CLI_VERSION",
    "DEFAULT_STRIPE_API_BASE",
    "DEFAULT_STRIPE_HTTP_TIMEOUT_S",
    "ENV_STRIPE_API_BASE",
    "ENV_STRIPE_HTTP_TIMEOUT_S",
    "FORM_CONTENT_TYPE",
    "FORM_KEY_DEVICE_NAME",
    "FORM_KEY_WEBSOCKET_FEATURES",
    "HEADER_ACCEPT_ENCODING",
    "HEADER_AUTHORIZATION",
    "HEADER_CLIENT_USER_AGENT",
    "HEADER_CONTENT_TYPE",
    "HEADER_USER_AGENT",
    "SESSION_PATH",
    "USER_AGENT",
]
