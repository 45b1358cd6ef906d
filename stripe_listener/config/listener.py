"""Session request defaults (env names and fallback values)."""

from __future__ import annotations

ENV_STRIPE_DEVICE_NAME = "STRIPE_DEVICE_NAME"
ENV_STRIPE_WEBSOCKET_FEATURES = "STRIPE_WEBSOCKET_FEATURES"

DEFAULT_STRIPE_DEVICE_NAME = "custom-stripe-listener"
DEFAULT_STRIPE_WEBSOCKET_FEATURES: tuple[str, ...] = ("webhooks",)

__all__ = [
    "DEFAULT_STRIPE_DEVICE_NAME",
    "DEFAULT_STRIPE_WEBSOCKET_FEATURES",
    "ENV_STRIPE_DEVICE_NAME",
    "ENV_STRIPE_WEBSOCKET_FEATURES",
]
