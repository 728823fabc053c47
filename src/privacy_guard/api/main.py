"""FastAPI application entry point for the privacy API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from privacy_guard.api.routes import health, privacy
from privacy_guard.consent_store import ConsentStore

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


def create_app(store: ConsentStore | None = None) -> FastAPI:
    """Build the API application.

    Args:
        store: Consent store to serve. When omitted, a SQLAlchemy-backed store
            is created on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize resources on startup and clean up on shutdown."""
        if store is not None:
            yield
            return

        from privacy_guard.data.db import init_db
        from privacy_guard.services.persistence import SqlAlchemyPersistenceAdapter

        init_db()
        owned = ConsentStore(SqlAlchemyPersistenceAdapter())
        owned.initialize()
        app.state.consent_store = owned
        try:
            yield
        finally:
            app.state.consent_store = None
            owned.close()

    app = FastAPI(
        title="Privacy Guard API",
        description="Consent tracking, feature gating and panic switch for privacy-sensitive features",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.consent_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(privacy.router, prefix="/api")
    return app


app = create_app()


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "privacy_guard.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
