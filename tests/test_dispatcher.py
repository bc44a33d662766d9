"""Tests for event-type lookup, handler invocation and response synthesis."""

import asyncio
import functools
import threading
import time

import pytest
from starlette.responses import JSONResponse, PlainTextResponse

from clerk_webhooks.dispatcher import build_handler_map, dispatch
from clerk_webhooks.events import EVENT_CATALOG
from clerk_webhooks.models.envelope import VerifiedEnvelope
from clerk_webhooks.registration import HandlerErrorPolicy, WebhookRegistrationConfig


def _envelope(event_type: str, data: dict | None = None) -> VerifiedEnvelope:
    return VerifiedEnvelope(type=event_type, data=data or {"id": "user_1"}, object="event")


class Recorder:
    """Async handler that records its calls and returns a fixed result."""

    def __init__(self, result=None):
        self.calls: list[dict] = []
        self.result = result

    async def __call__(self, payload):
        self.calls.append(payload)
        return self.result


def test_build_handler_map_covers_catalog():
    on_user_created = Recorder()
    handler_map = build_handler_map(WebhookRegistrationConfig(on_user_created=on_user_created))
    assert set(handler_map) == {route.event_type.value for route in EVENT_CATALOG}
    assert handler_map["user.created"] is on_user_created
    assert handler_map["user.deleted"] is None


@pytest.mark.asyncio
async def test_unregistered_event_type_is_404():
    on_user_created = Recorder()
    config = WebhookRegistrationConfig(on_user_created=on_user_created)
    response = await dispatch(config, _envelope("user.deleted"))
    assert response.status_code == 404
    assert response.body == b""
    assert on_user_created.calls == []


@pytest.mark.asyncio
async def test_unknown_event_type_is_404():
    response = await dispatch(WebhookRegistrationConfig(), _envelope("billing.plan.created"))
    assert response.status_code == 404
    assert response.body == b""


@pytest.mark.asyncio
async def test_handler_returning_none_yields_empty_200():
    on_user_created = Recorder()
    config = WebhookRegistrationConfig(on_user_created=on_user_created)
    response = await dispatch(config, _envelope("user.created", {"id": "user_1", "username": "ada"}))
    assert response.status_code == 200
    assert response.body == b""
    assert on_user_created.calls == [{"id": "user_1", "username": "ada"}]


@pytest.mark.asyncio
async def test_sync_handler_is_supported():
    seen = []
    config = WebhookRegistrationConfig(on_session_ended=seen.append)
    response = await dispatch(config, _envelope("session.ended", {"id": "sess_1"}))
    assert response.status_code == 200
    assert seen == [{"id": "sess_1"}]


@pytest.mark.asyncio
async def test_handler_response_passes_through_unmodified():
    custom = PlainTextResponse("queued", status_code=202, headers={"X-Job": "job_1"})
    config = WebhookRegistrationConfig(on_organization_created=Recorder(result=custom))
    response = await dispatch(config, _envelope("organization.created"))
    assert response is custom
    assert response.status_code == 202
    assert response.body == b"queued"


@pytest.mark.asyncio
async def test_each_event_reaches_only_its_own_handler():
    on_role_created = Recorder()
    on_role_updated = Recorder(result=JSONResponse({"ok": True}))
    config = WebhookRegistrationConfig(on_role_created=on_role_created, on_role_updated=on_role_updated)

    response = await dispatch(config, _envelope("role.updated", {"id": "role_1"}))

    assert response.status_code == 200
    assert response.body == b'{"ok":true}'
    assert on_role_updated.calls == [{"id": "role_1"}]
    assert on_role_created.calls == []


@pytest.mark.asyncio
async def test_handler_exception_propagates_by_default():
    async def boom(payload):
        raise RuntimeError("database down")

    config = WebhookRegistrationConfig(on_user_created=boom)
    with pytest.raises(RuntimeError, match="database down"):
        await dispatch(config, _envelope("user.created"))


@pytest.mark.asyncio
async def test_handler_exception_becomes_500_when_configured():
    async def boom(payload):
        raise RuntimeError("database down")

    config = WebhookRegistrationConfig(on_user_created=boom, handler_errors=HandlerErrorPolicy.RESPOND)
    response = await dispatch(config, _envelope("user.created"))
    assert response.status_code == 500
    assert response.body == b"Internal Server Error"


@pytest.mark.asyncio
async def test_handler_returning_non_response_is_rejected():
    config = WebhookRegistrationConfig(on_user_created=Recorder(result={"status": "ok"}))
    with pytest.raises(TypeError, match="expected a Response or None"):
        await dispatch(config, _envelope("user.created"))


@pytest.mark.asyncio
async def test_sync_handler_runs_off_the_event_loop():
    order = []

    def slow_handler(payload):
        time.sleep(0.3)
        order.append("handler")

    async def other_request():
        await asyncio.sleep(0.05)
        order.append("other")

    config = WebhookRegistrationConfig(on_user_created=slow_handler)
    response, _ = await asyncio.gather(dispatch(config, _envelope("user.created")), other_request())

    assert response.status_code == 200
    assert order == ["other", "handler"]


@pytest.mark.asyncio
async def test_sync_handler_runs_in_worker_thread():
    threads = []
    config = WebhookRegistrationConfig(on_user_created=lambda payload: threads.append(threading.get_ident()))
    await dispatch(config, _envelope("user.created"))
    assert threads and threads[0] != threading.get_ident()


@pytest.mark.asyncio
async def test_async_partial_handler_is_awaited():
    calls = []

    async def handle(tag, payload):
        calls.append((tag, payload["id"]))
        return PlainTextResponse("ok", status_code=202)

    config = WebhookRegistrationConfig(on_user_created=functools.partial(handle, "primary"))
    response = await dispatch(config, _envelope("user.created"))
    assert response.status_code == 202
    assert calls == [("primary", "user_1")]
