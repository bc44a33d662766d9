"""CLI entry point: run the receiver, or send it a signed test event."""

import argparse
import asyncio
import importlib
import json
import os
import sys

from clerk_webhooks.config import Settings
from clerk_webhooks.registration import WebhookRegistrationConfig


def load_config(import_string: str) -> WebhookRegistrationConfig:
    """Load ``package.module:attribute``.

    The attribute may be a WebhookRegistrationConfig or a zero-argument
    callable returning one.
    """
    module_path, sep, attr = import_string.partition(":")
    if not sep or not module_path or not attr:
        raise ValueError(f"expected 'module:attribute', got {import_string!r}")

    target = getattr(importlib.import_module(module_path), attr)
    if callable(target) and not isinstance(target, WebhookRegistrationConfig):
        target = target()
    if not isinstance(target, WebhookRegistrationConfig):
        raise TypeError(f"{import_string} is {type(target).__name__}, not WebhookRegistrationConfig")
    return target


def _serve(args: argparse.Namespace, config: WebhookRegistrationConfig) -> None:
    if args.local:
        os.environ["CLERK_WEBHOOKS_LOCAL_MODE"] = "1"
    settings = Settings()

    import uvicorn

    from clerk_webhooks.main import create_app

    app = create_app(config, settings)
    uvicorn.run(
        app,
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_config=None,
    )


def _send(args: argparse.Namespace) -> int:
    from clerk_webhooks.emitter import send_test_event

    secret = args.secret or Settings().webhook_secret
    if not secret:
        print("No secret: pass --secret or set WEBHOOK_SECRET", file=sys.stderr)
        return 2

    resp = asyncio.run(send_test_event(args.url, secret, args.event_type, json.loads(args.data)))
    print(f"HTTP {resp.status_code}")
    if resp.text:
        print(resp.text)
    return 0 if resp.status_code < 400 else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="clerk-webhooks",
        description="Clerk webhook receiver with Svix signature verification",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the webhook receiver under uvicorn")
    serve.add_argument("--config", required=True, help="Registration config, as module:attribute")
    serve.add_argument("--host", default=None, help="Bind host (default: settings.host)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default: settings.port)")
    serve.add_argument("--local", action="store_true", help="Local dev mode: colored console logs")

    send = sub.add_parser("send", help="POST a signed test event to a receiver")
    send.add_argument("--url", required=True, help="Webhook endpoint URL")
    send.add_argument("--event-type", required=True, help="Wire event type, e.g. user.created")
    send.add_argument("--data", default="{}", help="Event data as a JSON object")
    send.add_argument("--secret", default=None, help="Signing secret (default: WEBHOOK_SECRET)")

    args = parser.parse_args(argv)

    if args.command == "serve":
        try:
            config = load_config(args.config)
        except (ValueError, TypeError, ImportError, AttributeError) as exc:
            parser.error(f"--config: {exc}")
        _serve(args, config)
        return 0
    return _send(args)


if __name__ == "__main__":
    sys.exit(main())
