"""Pydantic model for the verified Clerk event envelope."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class VerifiedEnvelope(BaseModel):
    """A Clerk event after signature verification.

    ``type`` is the wire event-type string and selects the payload shape of
    ``data``. ``data`` is kept exactly as decoded from the body.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str
    data: dict[str, Any]
    object: str | None = None
    timestamp: int | None = None
    instance_id: str | None = None
