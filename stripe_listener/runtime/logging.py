"""Logging initialization."""

from __future__ import annotations

import os
import logging

from stripe_listener.config.logging import LOG_LEVEL, LOG_FORMAT, WIRE_LOGGERS, ENV_SHOW_WIRE_LOGS


def configure_logging(level: str | None = None) -> None:
    if (os.getenv(ENV_SHOW_WIRE_LOGS) or "").strip().lower() not in {"1", "true", "yes"}:
        for name in WIRE_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
