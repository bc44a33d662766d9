"""Master router: health plus the Clerk webhook endpoint."""

from fastapi import APIRouter

from clerk_webhooks.api.routes import health
from clerk_webhooks.api.routes.webhooks import build_webhooks_router
from clerk_webhooks.webhooks import WebhooksHandler


def build_api_router(handler: WebhooksHandler, webhook_path: str) -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(health.router, tags=["Health"])
    api_router.include_router(build_webhooks_router(handler, webhook_path))
    return api_router
