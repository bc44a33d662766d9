"""Clerk webhooks endpoint: verify the Svix signature, then dispatch.

Per request: Received -> Verified -> Unhandled (404) or Invoked -> Responded.
Header or signature problems end the request as Rejected (400).
"""

import logging

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from clerk_webhooks.config import Settings
from clerk_webhooks.dispatcher import dispatch
from clerk_webhooks.errors.exceptions import (
    ConfigurationError,
    MissingHeadersError,
    VerificationFailedError,
)
from clerk_webhooks.logging_config import bind_request_context, delivery_context
from clerk_webhooks.registration import WebhookRegistrationConfig
from clerk_webhooks.verification import (
    build_verifier,
    canonical_body,
    extract_signing_headers,
    verify,
)

logger = logging.getLogger(__name__)

MISSING_SECRET_MESSAGE = "Please add WEBHOOK_SECRET from Clerk Dashboard to .env or .env.local"
LEGACY_VERIFICATION_ERROR_BODY = "Error occured"


def resolve_secret(config: WebhookRegistrationConfig, settings: Settings | None = None) -> str:
    """Pick the signing secret: config override first, then WEBHOOK_SECRET."""
    if config.secret:
        return config.secret
    settings = settings or Settings()
    if settings.webhook_secret:
        return settings.webhook_secret
    raise ConfigurationError(MISSING_SECRET_MESSAGE)


class WebhooksHandler:
    """Request handler bound to one registration config and one resolved secret.

    Construction fails with ConfigurationError if no secret can be resolved,
    so a misconfigured deployment never starts serving.
    """

    def __init__(self, config: WebhookRegistrationConfig, settings: Settings | None = None) -> None:
        self.config = config
        self._verifier = build_verifier(resolve_secret(config, settings))

    async def POST(self, request: Request) -> Response:
        return await self.handle(request)

    async def handle(self, request: Request) -> Response:
        try:
            headers = extract_signing_headers(request.headers)
        except MissingHeadersError as exc:
            logger.warning("Rejected webhook without svix headers: missing %s", exc.details["missing"])
            return PlainTextResponse(exc.message, status_code=exc.status_code)

        with delivery_context(headers.message_id):
            raw = await request.body()
            body: str | bytes = raw
            try:
                if not self.config.verify_raw_body:
                    body = canonical_body(raw)
                envelope = verify(self._verifier, body, headers)
            except VerificationFailedError as exc:
                if isinstance(body, str) and body.encode("utf-8") != raw:
                    logger.info(
                        "Body was re-serialized before verification; if the sender's JSON "
                        "does not round-trip (e.g. floats), set verify_raw_body=True"
                    )
                return self._verification_failed(exc)

            bind_request_context(event_type=envelope.type)
            return await dispatch(self.config, envelope)

    def _verification_failed(self, exc: VerificationFailedError) -> Response:
        body = LEGACY_VERIFICATION_ERROR_BODY if self.config.legacy_error_body else exc.message
        return PlainTextResponse(body, status_code=exc.status_code)


def create_webhooks_handler(
    config: WebhookRegistrationConfig, settings: Settings | None = None
) -> WebhooksHandler:
    """Build a handler for ``config``; raises ConfigurationError without a secret."""
    return WebhooksHandler(config, settings)
