"""Runtime configuration read from the environment.

``DB_URL`` selects the database used by the SQLAlchemy persistence adapter.
Without it, a SQLite file named by ``PRIVACY_GUARD_DB_FILE`` is created in
the project root. ``PRIVACY_GUARD_LOG_LEVEL`` controls the log level used by
the command-line entry point.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DB_FILENAME = "privacy_guard.db"


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    db_url: str | None = None
    db_filename: str = DEFAULT_DB_FILENAME
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Return settings built from the current environment."""
    return Settings(
        db_url=os.getenv("DB_URL") or None,
        db_filename=os.getenv("PRIVACY_GUARD_DB_FILE") or DEFAULT_DB_FILENAME,
        log_level=os.getenv("PRIVACY_GUARD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
