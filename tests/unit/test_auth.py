from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest
import orjson
from fakes import SESSION_BODY, make_settings, session_client

from stripe_listener.state import Session
from stripe_listener.errors import AuthError
from stripe_listener.transport import authorize, build_headers
from stripe_listener.transport.headers import build_client_user_agent


@pytest.mark.asyncio
async def test_authorize_posts_form_and_returns_session() -> None:
    seen: list[httpx.Request] = []
    settings = make_settings(device_name="my-box", websocket_features=["webhooks", "v2"])

    async with session_client(seen=seen) as client:
        session = await authorize(client, settings)

    assert session == Session(**SESSION_BODY)

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.test/v1/stripecli/sessions"
    assert request.headers["Authorization"] == "Bearer sk_test_123"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert request.headers["Accept-Encoding"] == "identity"
    assert request.headers["User-Agent"] == "Stripe/v1 stripe-cli/1.21.0"

    form = parse_qs(request.content.decode("utf-8"))
    assert form["device_name"] == ["my-box"]
    assert form["websocket_features[]"] == ["webhooks", "v2"]


@pytest.mark.asyncio
async def test_authorize_non_success_carries_status_and_body() -> None:
    async with session_client(status_code=401, body=b'{"error":"bad key"}') as client:
        with pytest.raises(AuthError) as exc:
            await authorize(client, make_settings())

    assert exc.value.status_code == 401
    assert "bad key" in exc.value.body
    assert "401" in str(exc.value)


@pytest.mark.asyncio
async def test_authorize_bad_json_is_decode_error() -> None:
    async with session_client(body=b"<html>") as client:
        with pytest.raises(AuthError) as exc:
            await authorize(client, make_settings())

    assert exc.value.status_code is None
    assert str(exc.value).startswith("decode session")


@pytest.mark.asyncio
async def test_authorize_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(AuthError) as exc:
            await authorize(client, make_settings())

    assert "connection refused" in str(exc.value)


@pytest.mark.asyncio
async def test_authorize_missing_fields_default_to_empty() -> None:
    async with session_client(body=b'{"websocket_id": "ws_9", "reconnect_delay": "soon"}') as client:
        session = await authorize(client, make_settings())

    assert session.websocket_id == "ws_9"
    assert session.reconnect_delay == 0
    assert session.secret == ""


def test_socket_headers_omit_credentials() -> None:
    headers = build_headers()
    assert "Authorization" not in headers
    assert "Content-Type" not in headers
    assert headers["Accept-Encoding"] == "identity"


def test_client_user_agent_identifies_cli() -> None:
    info = orjson.loads(build_client_user_agent())
    assert info["name"] == "stripe-cli"
    assert info["version"] == "1.21.0"
    assert info["publisher"] == "stripe"
    assert info["os"]
