"""Application-facing event handler interface."""

from __future__ import annotations

from collections.abc import Awaitable

from stripe_listener.state import V2Event, WebhookEvent, V2EventPayload, StripeEventPayload

HandlerResult = Awaitable[None] | None


class EventHandler:
    """Receives events from the listener, one call per frame, in arrival order.

    Hooks may be plain methods or coroutines. Every hook defaults to a no-op, so
    subclasses only override what they care about. Events are acknowledged
    before the hook runs.
    """

    def on_webhook_event(self, event: WebhookEvent, parsed: StripeEventPayload) -> HandlerResult:
        return None

    def on_v2_event(self, event: V2Event, parsed: V2EventPayload) -> HandlerResult:
        return None

    def on_unknown_message(self, raw_type: str, data: bytes) -> HandlerResult:
        return None


__all__ = ["EventHandler", "HandlerResult"]
