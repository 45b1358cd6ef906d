"""Command-line listener that prints every event it receives."""

from __future__ import annotations

import sys
import signal
import asyncio
import logging
import argparse
import contextlib
import dataclasses
from typing import Any, TextIO

import orjson

from stripe_listener.listener import Listener
from stripe_listener.handlers import EventHandler
from stripe_listener.config.secrets import ENV_STRIPE_API_KEY, get_stripe_api_key
from stripe_listener.errors import ListenerError, ListenCancelled
from stripe_listener.runtime import load_settings, configure_logging
from stripe_listener.state import V2Event, WebhookEvent, V2EventPayload, ListenerSettings, StripeEventPayload

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _pretty(raw: dict[str, Any], fallback: str) -> str:
    if not raw:
        return fallback
    return orjson.dumps(raw, option=orjson.OPT_INDENT_2).decode("utf-8")


class PrintingEventHandler(EventHandler):
    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out or sys.stdout

    def _emit(self, kind: str, event_id: str, body: str) -> None:
        print(f"---- {kind} [{event_id or '?'}] ----", file=self._out)
        print(body, file=self._out, flush=True)

    def on_webhook_event(self, event: WebhookEvent, parsed: StripeEventPayload) -> None:
        self._emit(parsed.type or "webhook_event", parsed.id, _pretty(parsed.raw, event.event_payload))

    def on_v2_event(self, event: V2Event, parsed: V2EventPayload) -> None:
        self._emit(parsed.type or "v2_event", parsed.id, _pretty(parsed.raw, event.payload))

    def on_unknown_message(self, raw_type: str, data: bytes) -> None:
        self._emit(f"unknown:{raw_type}", "", data.decode("utf-8", errors="replace"))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="stripe_listener", description="Listen for Stripe events")
    parser.add_argument("--api-key", type=str, default=None, help=f"API key (overrides {ENV_STRIPE_API_KEY} env)")
    parser.add_argument("--device-name", type=str, default=None, help="Device name reported to Stripe")
    parser.add_argument(
        "--feature",
        action="append",
        default=None,
        help="Socket feature to request (repeatable, default: webhooks)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> ListenerSettings | None:
    api_key = (args.api_key or "").strip() or get_stripe_api_key()
    if not api_key:
        return None
    settings = load_settings(api_key)
    overrides: dict[str, Any] = {}
    if args.device_name:
        overrides["device_name"] = args.device_name
    if args.feature:
        overrides["websocket_features"] = tuple(args.feature)
    return dataclasses.replace(settings, **overrides) if overrides else settings


def _install_stop_handlers(stop: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # Not available on every platform (e.g. Windows event loops).
        with contextlib.suppress(NotImplementedError, RuntimeError):
            loop.add_signal_handler(sig, stop.set)


async def run(settings: ListenerSettings, *, handler: EventHandler | None = None) -> int:
    stop = asyncio.Event()
    _install_stop_handlers(stop)
    listener = Listener(settings, handler or PrintingEventHandler())
    try:
        await listener.listen_all(stop)
    except ListenCancelled:
        logger.info("stopped")
    except ListenerError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging("DEBUG" if args.debug else None)
    settings = resolve_settings(args)
    if settings is None:
        print(f"missing API key: use --api-key or set {ENV_STRIPE_API_KEY}", file=sys.stderr)
        return EXIT_USAGE
    return asyncio.run(run(settings))


__all__ = ["PrintingEventHandler", "main", "parse_args", "resolve_settings", "run"]
