"""Inbound Clerk webhook route."""

from fastapi import APIRouter, Request
from starlette.responses import Response

from clerk_webhooks.webhooks import WebhooksHandler


def build_webhooks_router(handler: WebhooksHandler, path: str) -> APIRouter:
    """Mount ``handler.POST`` at ``path``; the handler builds every response itself."""
    router = APIRouter(tags=["Webhooks"])

    @router.post(path, include_in_schema=False)
    async def receive_clerk_webhook(request: Request) -> Response:
        return await handler.POST(request)

    return router
