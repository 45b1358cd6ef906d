"""Client identity headers shared by the session call and the socket dial."""

from __future__ import annotations

import sys
import platform

import orjson

from stripe_listener.config.api import (
    CLI_NAME,
    USER_AGENT,
    CLI_VERSION,
    CLI_PUBLISHER,
    FORM_CONTENT_TYPE,
    HEADER_USER_AGENT,
    HEADER_CONTENT_TYPE,
    HEADER_AUTHORIZATION,
    HEADER_ACCEPT_ENCODING,
    HEADER_CLIENT_USER_AGENT,
)


def build_client_user_agent() -> str:
    os_name = sys.platform
    return orjson.dumps({
        "name": CLI_NAME,
        "version": CLI_VERSION,
        "publisher": CLI_PUBLISHER,
        "os": os_name,
        "uname": f"{os_name} {platform.machine()}",
    }).decode("utf-8")


def build_headers(api_key: str | None = None, *, include_user_agent: bool = True) -> dict[str, str]:
    """Return the identity headers; the bearer token is only added when a key is given."""
    headers = {
        HEADER_ACCEPT_ENCODING: "identity",
        HEADER_CLIENT_USER_AGENT: build_client_user_agent(),
    }
    if include_user_agent:
        headers[HEADER_USER_AGENT] = USER_AGENT
    if api_key:
        headers[HEADER_AUTHORIZATION] = f"Bearer {api_key}"
        headers[HEADER_CONTENT_TYPE] = FORM_CONTENT_TYPE
    return headers


__all__ = ["build_client_user_agent", "build_headers"]
