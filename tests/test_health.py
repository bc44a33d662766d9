"""Tests for the FastAPI app: health, routing and trace ids."""

import pytest
from httpx import ASGITransport, AsyncClient

from clerk_webhooks import ConfigurationError, WebhookRegistrationConfig, __version__
from clerk_webhooks.main import create_app


class Recorder:
    def __init__(self):
        self.calls: list[dict] = []

    async def __call__(self, payload):
        self.calls.append(payload)


@pytest.fixture
def on_user_created():
    return Recorder()


@pytest.fixture
def app(secret, settings, on_user_created):
    return create_app(
        WebhookRegistrationConfig(secret=secret, on_user_created=on_user_created),
        settings,
        configure_logs=False,
    )


@pytest.mark.asyncio
async def test_health_check(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "clerk-webhooks"
    assert data["version"] == __version__
    assert data["known_event_types"] == 31


@pytest.mark.asyncio
async def test_signed_delivery_through_app(app, on_user_created, sign, clerk_event, post_webhook):
    body, headers = sign(clerk_event("user.created", {"id": "user_7"}))
    response = await post_webhook(app, body, headers)
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["x-trace-id"].startswith("trc_")
    assert on_user_created.calls == [{"id": "user_7"}]


@pytest.mark.asyncio
async def test_trace_id_is_echoed(app, post_webhook):
    response = await post_webhook(app, b"{}", {"x-trace-id": "trc_from_caller"})
    assert response.status_code == 400
    assert response.text == "Error occurred -- no svix headers"
    assert response.headers["x-trace-id"] == "trc_from_caller"


@pytest.mark.asyncio
async def test_unregistered_event_through_app(app, on_user_created, sign, clerk_event, post_webhook):
    body, headers = sign(clerk_event("session.revoked", {"id": "sess_1"}))
    response = await post_webhook(app, body, headers)
    assert response.status_code == 404
    assert response.content == b""
    assert on_user_created.calls == []


def test_create_app_without_secret_fails(settings):
    with pytest.raises(ConfigurationError):
        create_app(WebhookRegistrationConfig(), settings, configure_logs=False)
