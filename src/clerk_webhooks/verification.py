"""Svix signature verification for inbound Clerk webhooks.

Clerk delivers webhooks through Svix, which signs ``{id}.{timestamp}.{body}``
with HMAC-SHA256 under the endpoint secret and rejects timestamps more than
five minutes from now. The cryptographic check itself is done by
``svix.webhooks.Webhook``; this module assembles its inputs and translates
its failures.
"""

import base64
import binascii
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError
from svix.webhooks import Webhook

from clerk_webhooks.errors.exceptions import (
    ConfigurationError,
    MissingHeadersError,
    VerificationFailedError,
)
from clerk_webhooks.models.envelope import VerifiedEnvelope

logger = logging.getLogger(__name__)

SVIX_ID_HEADER = "svix-id"
SVIX_TIMESTAMP_HEADER = "svix-timestamp"
SVIX_SIGNATURE_HEADER = "svix-signature"
SECRET_PREFIX = "whsec_"


@dataclass(frozen=True)
class SigningHeaders:
    message_id: str
    timestamp: str
    signature: str

    def as_svix_headers(self) -> dict[str, str]:
        return {
            SVIX_ID_HEADER: self.message_id,
            SVIX_TIMESTAMP_HEADER: self.timestamp,
            SVIX_SIGNATURE_HEADER: self.signature,
        }


def build_verifier(secret: str) -> Webhook:
    """Create the svix verifier for a signing secret.

    The secret must be non-empty, strict base64 once the ``whsec_`` prefix is
    removed. Anything svix refuses is reported as ConfigurationError too.
    """
    if not isinstance(secret, str):
        raise ConfigurationError("WEBHOOK_SECRET must be a string")
    try:
        key = base64.b64decode(secret.removeprefix(SECRET_PREFIX), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ConfigurationError(f"WEBHOOK_SECRET is not valid base64: {exc}") from exc
    if not key:
        raise ConfigurationError("WEBHOOK_SECRET is empty; copy the signing secret from Clerk Dashboard")

    try:
        return Webhook(secret)
    except Exception as exc:
        raise ConfigurationError(f"WEBHOOK_SECRET was rejected by svix: {exc}") from exc


def extract_signing_headers(headers: Mapping[str, str]) -> SigningHeaders:
    """Read the Svix header triplet, failing before any cryptographic work.

    ``headers`` should be case-insensitive (Starlette's ``Headers`` is).
    """
    message_id = headers.get(SVIX_ID_HEADER)
    timestamp = headers.get(SVIX_TIMESTAMP_HEADER)
    signature = headers.get(SVIX_SIGNATURE_HEADER)

    missing = [
        name
        for name, value in (
            (SVIX_ID_HEADER, message_id),
            (SVIX_TIMESTAMP_HEADER, timestamp),
            (SVIX_SIGNATURE_HEADER, signature),
        )
        if not value
    ]
    if missing:
        raise MissingHeadersError(missing)

    return SigningHeaders(message_id=message_id, timestamp=timestamp, signature=signature)


def canonical_body(raw: bytes) -> str:
    """Re-serialize a JSON body compactly, as JSON.stringify does on the sender side.

    Strings, integers, booleans and key order survive the round trip. Floats
    may not: Python writes ``1e-06`` and ``1.0`` where JavaScript writes
    ``0.000001`` and ``1``. Deliveries whose payload carries such numbers only
    verify with ``WebhookRegistrationConfig(verify_raw_body=True)``.
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Rejected webhook with undecodable body: %s", exc)
        raise VerificationFailedError(f"body is not valid JSON: {exc}") from exc
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def verify(verifier: Webhook, body: str | bytes, headers: SigningHeaders) -> VerifiedEnvelope:
    """Verify one signed delivery and return its envelope.

    svix only accepts or rejects; the envelope is decoded here from the same
    body that was verified. A single attempt; any rejection is final for the
    request.
    """
    try:
        verifier.verify(body, headers.as_svix_headers())
    except Exception as exc:
        logger.warning(
            "Error verifying webhook (svix_id=%s, svix_timestamp=%s): %s",
            headers.message_id,
            headers.timestamp,
            exc,
        )
        raise VerificationFailedError(str(exc), message_id=headers.message_id) from exc

    try:
        return VerifiedEnvelope.model_validate(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Verified webhook body is not JSON (svix_id=%s): %s", headers.message_id, exc)
        raise VerificationFailedError("body is not valid JSON", message_id=headers.message_id) from exc
    except ValidationError as exc:
        logger.warning(
            "Verified webhook has no usable envelope (svix_id=%s): %d error(s)",
            headers.message_id,
            exc.error_count(),
        )
        raise VerificationFailedError("malformed event envelope", message_id=headers.message_id) from exc
