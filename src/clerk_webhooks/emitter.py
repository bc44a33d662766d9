"""Send Svix-signed test events to a webhook endpoint.

Development tooling: builds an event the way Clerk does, signs it the way
Svix does, and posts it once. There is no retry; redelivery is the real
sender's job.
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any

import httpx
from svix.webhooks import Webhook

from clerk_webhooks.verification import (
    SVIX_ID_HEADER,
    SVIX_SIGNATURE_HEADER,
    SVIX_TIMESTAMP_HEADER,
)

logger = logging.getLogger(__name__)


def build_event(event_type: str, data: dict[str, Any], instance_id: str | None = None) -> dict[str, Any]:
    """Build an unsigned Clerk event envelope."""
    event: dict[str, Any] = {
        "data": data,
        "object": "event",
        "type": event_type,
        "timestamp": int(datetime.now(timezone.utc).timestamp() * 1000),
    }
    if instance_id:
        event["instance_id"] = instance_id
    return event


def serialize_event(event: dict[str, Any]) -> str:
    """Compact JSON, matching what the receiver re-serializes before verifying."""
    return json.dumps(event, separators=(",", ":"), ensure_ascii=False)


def sign_body(
    secret: str,
    body: str,
    message_id: str | None = None,
    timestamp: datetime | None = None,
) -> dict[str, str]:
    """Return the svix-id / svix-timestamp / svix-signature headers for ``body``."""
    message_id = message_id or f"msg_{uuid.uuid4().hex}"
    timestamp = timestamp or datetime.now(timezone.utc)
    signature = Webhook(secret).sign(msg_id=message_id, timestamp=timestamp, data=body)
    return {
        SVIX_ID_HEADER: message_id,
        SVIX_TIMESTAMP_HEADER: str(int(timestamp.timestamp())),
        SVIX_SIGNATURE_HEADER: signature,
    }


async def send_test_event(
    url: str,
    secret: str,
    event_type: str,
    data: dict[str, Any],
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float = 10.0,
) -> httpx.Response:
    """Sign and POST one event to ``url`` and return the endpoint's response."""
    body = serialize_event(build_event(event_type, data))
    headers = {"Content-Type": "application/json", **sign_body(secret, body)}

    async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
        resp = await client.post(url, content=body.encode("utf-8"), headers=headers)

    logger.info("Sent %s to %s: HTTP %s", event_type, url, resp.status_code)
    return resp
