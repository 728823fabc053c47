"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Report API status and whether the consent store is available."""
    store = getattr(request.app.state, "consent_store", None)
    return {
        "status": "healthy",
        "consent_store": "ready" if store is not None else "unavailable",
    }
