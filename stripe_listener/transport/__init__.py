from .auth import authorize
from .headers import build_headers
from .connection import build_ws_url, get_ws_options, open_connection

__all__ = ["authorize", "build_headers", "build_ws_url", "get_ws_options", "open_connection"]
