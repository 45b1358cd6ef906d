"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# websockets/httpx log every frame and request at DEBUG; keep them quiet unless asked.
ENV_SHOW_WIRE_LOGS = "SHOW_WIRE_LOGS"
WIRE_LOGGERS: tuple[str, ...] = ("websockets", "httpx", "httpcore")

__all__ = ["ENV_SHOW_WIRE_LOGS", "LOG_FORMAT", "LOG_LEVEL", "WIRE_LOGGERS"]
