"""Route verified Clerk events to registered handlers and build the response."""

import functools
import inspect
import logging
from typing import Any, cast

from starlette.concurrency import run_in_threadpool
from starlette.responses import PlainTextResponse, Response

from clerk_webhooks.events import EVENT_CATALOG, route_for
from clerk_webhooks.models.envelope import VerifiedEnvelope
from clerk_webhooks.registration import HandlerErrorPolicy, HandlerFn, WebhookRegistrationConfig

logger = logging.getLogger(__name__)

HandlerMap = dict[str, HandlerFn[Any] | None]


def build_handler_map(config: WebhookRegistrationConfig) -> HandlerMap:
    """Map every known wire event type to its configured handler (or None)."""
    return {
        route.event_type.value: getattr(config, route.config_field)
        for route in EVENT_CATALOG
    }


async def dispatch(config: WebhookRegistrationConfig, envelope: VerifiedEnvelope) -> Response:
    """Invoke the handler for ``envelope.type`` and return the HTTP response.

    Unknown or unregistered event types get an empty 404; that is the normal
    outcome for events a deployment does not subscribe to.
    """
    handler = build_handler_map(config).get(envelope.type)
    if handler is None:
        logger.info("No handler registered for event type %s", envelope.type)
        return Response(status_code=404)

    route = route_for(envelope.type)
    payload = cast(route.payload_type, envelope.data)

    if config.handler_errors == HandlerErrorPolicy.RESPOND:
        try:
            return await _invoke(handler, payload)
        except Exception:
            logger.exception("Handler for %s failed", envelope.type)
            return PlainTextResponse("Internal Server Error", status_code=500)

    return await _invoke(handler, payload)


async def _invoke(handler: HandlerFn[Any], payload: Any) -> Response:
    # Sync handlers run in the threadpool, as FastAPI runs sync endpoints.
    if _is_async_callable(handler):
        result = await handler(payload)
    else:
        result = await run_in_threadpool(handler, payload)
        if inspect.isawaitable(result):
            result = await result

    if result is None:
        return Response(status_code=200)
    if isinstance(result, Response):
        return result
    raise TypeError(
        f"Webhook handler {getattr(handler, '__qualname__', handler)!r} returned "
        f"{type(result).__name__}; expected a Response or None"
    )


def _is_async_callable(obj: Any) -> bool:
    while isinstance(obj, functools.partial):
        obj = obj.func
    return inspect.iscoroutinefunction(obj) or (
        callable(obj) and inspect.iscoroutinefunction(getattr(obj, "__call__", None))
    )
