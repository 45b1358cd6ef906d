"""Configuration module exports (constants only)."""

from .api import SESSION_PATH, USER_AGENT, CLI_VERSION
from .websocket import WS_SUBPROTOCOL, WS_CLOSE_NORMAL_CODE

__all__ = [
    "CLI_VERSION",
    "SESSION_PATH",
    "USER_AGENT",
    "WS_CLOSE_NORMAL_CODE",
    "WS_SUBPROTOCOL",
]
