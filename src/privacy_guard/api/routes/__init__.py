"""Route handlers for the API."""

from privacy_guard.api.routes import health, privacy

__all__ = ["health", "privacy"]
