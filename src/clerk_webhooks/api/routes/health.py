"""Health check endpoint."""

from fastapi import APIRouter

from clerk_webhooks import __version__
from clerk_webhooks.events import EVENT_CATALOG

router = APIRouter()


@router.get("/health")
async def health_check():
    """Return service health status."""
    return {
        "status": "healthy",
        "service": "clerk-webhooks",
        "version": __version__,
        "known_event_types": len(EVENT_CATALOG),
    }
