"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from clerk_webhooks import __version__
from clerk_webhooks.config import Settings, settings as default_settings
from clerk_webhooks.logging_config import configure_logging
from clerk_webhooks.registration import WebhookRegistrationConfig
from clerk_webhooks.webhooks import create_webhooks_handler

logger = logging.getLogger(__name__)


def create_app(
    config: WebhookRegistrationConfig,
    settings: Settings | None = None,
    configure_logs: bool = True,
) -> FastAPI:
    """Create the webhook receiver app for ``config``.

    The signing secret is resolved here, so a missing secret raises
    ConfigurationError before the app can serve a request.
    """
    settings = settings or default_settings
    if configure_logs:
        configure_logging(log_level=settings.log_level, json_output=not settings.local_mode)

    handler = create_webhooks_handler(config, settings)

    app = FastAPI(
        title="Clerk Webhooks",
        version=__version__,
        description="Svix-verified Clerk webhook receiver.",
    )
    app.state.webhooks_handler = handler

    from clerk_webhooks.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from clerk_webhooks.api.router import build_api_router
    app.include_router(build_api_router(handler, settings.webhook_path))

    registered = [name for name, value in vars(config).items() if name.startswith("on_") and value]
    logger.info(
        "Clerk webhooks receiver ready at %s (%d handler(s) registered)",
        settings.webhook_path,
        len(registered),
    )
    return app
