"""Session authorization against the Stripe CLI sessions endpoint."""

from __future__ import annotations

import logging

import httpx
import orjson

from stripe_listener.errors import AuthError
from stripe_listener.state import Session, ListenerSettings
from stripe_listener.config.api import SESSION_PATH, FORM_KEY_DEVICE_NAME, FORM_KEY_WEBSOCKET_FEATURES

from .headers import build_headers

logger = logging.getLogger(__name__)


def build_session_form(settings: ListenerSettings) -> dict[str, str | list[str]]:
    return {
        FORM_KEY_DEVICE_NAME: settings.device_name,
        FORM_KEY_WEBSOCKET_FEATURES: list(settings.websocket_features),
    }


async def authorize(
    client: httpx.AsyncClient,
    settings: ListenerSettings,
    *,
    log: logging.Logger | None = None,
) -> Session:
    url = f"{settings.api_base}{SESSION_PATH}"
    try:
        response = await client.post(
            url,
            data=build_session_form(settings),
            headers=build_headers(settings.api_key),
        )
    except httpx.HTTPError as exc:
        raise AuthError(f"authorize request: {exc}") from exc

    if not response.is_success:
        raise AuthError("authorize failed", status_code=response.status_code, body=response.text)

    try:
        data = orjson.loads(response.content)
    except orjson.JSONDecodeError as exc:
        raise AuthError(f"decode session: {exc}") from exc
    if not isinstance(data, dict):
        raise AuthError("decode session: expected a JSON object")

    session = Session.from_dict(data)
    (log or logger).info(
        "session created ws_id=%s feature=%s",
        session.websocket_id,
        session.websocket_authorized_feature,
    )
    return session


__all__ = ["authorize", "build_session_form"]
