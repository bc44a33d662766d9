"""Shared test fixtures."""

import base64
import json
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request
from svix.webhooks import Webhook

from clerk_webhooks.config import Settings

SECRET = "whsec_" + base64.b64encode(b"clerk-webhooks-test-secret-0001").decode()
OTHER_SECRET = "whsec_" + base64.b64encode(b"clerk-webhooks-test-secret-0002").decode()
WEBHOOK_PATH = "/api/webhooks/clerk"


@pytest.fixture(autouse=True)
def _no_secret_in_env(monkeypatch):
    """Keep a developer's WEBHOOK_SECRET out of the tests."""
    monkeypatch.delenv("WEBHOOK_SECRET", raising=False)
    monkeypatch.delenv("CLERK_WEBHOOKS_WEBHOOK_SECRET", raising=False)


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def other_secret():
    return OTHER_SECRET


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def clerk_event():
    """Build a Clerk event envelope as it arrives on the wire."""

    def _build(event_type: str, data: dict | None = None) -> dict:
        return {
            "data": data if data is not None else {"id": "user_2abc", "object": "user"},
            "object": "event",
            "type": event_type,
            "timestamp": 1716883200000,
            "instance_id": "ins_2test",
        }

    return _build


@pytest.fixture
def sign():
    """Serialize a payload compactly (or take it as given) and sign it the way Svix does.

    Returns (body_bytes, headers).
    """

    def _sign(
        payload: dict | str,
        secret: str = SECRET,
        msg_id: str = "msg_2test0001",
        timestamp: datetime | None = None,
    ) -> tuple[bytes, dict[str, str]]:
        if isinstance(payload, str):
            body = payload
        else:
            body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        ts = timestamp or datetime.now(timezone.utc)
        signature = Webhook(secret).sign(msg_id=msg_id, timestamp=ts, data=body)
        headers = {
            "content-type": "application/json",
            "svix-id": msg_id,
            "svix-timestamp": str(int(ts.timestamp())),
            "svix-signature": signature,
        }
        return body.encode("utf-8"), headers

    return _sign


@pytest.fixture
def make_request():
    """Build a Starlette POST request without a running app."""

    def _make(body: bytes, headers: dict[str, str]) -> Request:
        scope = {
            "type": "http",
            "method": "POST",
            "path": WEBHOOK_PATH,
            "query_string": b"",
            "headers": [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in headers.items()],
        }

        async def receive():
            return {"type": "http.request", "body": body, "more_body": False}

        return Request(scope, receive)

    return _make


@pytest.fixture
def post_webhook():
    """POST a body to the webhook route of an app through an in-process client."""

    async def _post(app, body: bytes, headers: dict[str, str]):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            return await ac.post(WEBHOOK_PATH, content=body, headers=headers)

    return _post
