"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from privacy_guard.consent_store import ConsentStore


def get_consent_store(request: Request) -> ConsentStore:
    """Return the consent store the application was started with.

    Raises:
        HTTPException: If the application has no store yet (503).
    """
    store: ConsentStore | None = getattr(request.app.state, "consent_store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Consent store is not initialized",
        )
    return store


ConsentStoreDep = Annotated[ConsentStore, Depends(get_consent_store)]
