"""Verify Svix-signed Clerk webhooks and dispatch them to typed handlers."""

__version__ = "0.1.0"

from clerk_webhooks.errors.exceptions import (
    ConfigurationError,
    MissingHeadersError,
    VerificationFailedError,
)
from clerk_webhooks.events import EventType
from clerk_webhooks.registration import HandlerErrorPolicy, WebhookRegistrationConfig
from clerk_webhooks.webhooks import WebhooksHandler, create_webhooks_handler

__all__ = [
    "ConfigurationError",
    "EventType",
    "HandlerErrorPolicy",
    "MissingHeadersError",
    "VerificationFailedError",
    "WebhookRegistrationConfig",
    "WebhooksHandler",
    "create_webhooks_handler",
]
