"""Persistence adapters for the consent record.

The consent store only depends on the ``PersistenceAdapter`` protocol:
``load()`` returns the stored record (or ``None`` when nothing has been
saved yet) and ``save()`` writes a full record. Adapters signal I/O
failures with ``PersistenceUnavailableError``; the store logs and absorbs
them.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError

from privacy_guard.data.db import get_session
from privacy_guard.data.models import SETTINGS_ROW_ID, PrivacySettings
from privacy_guard.models.consent import ConsentRecord
from privacy_guard.models.errors import PersistenceUnavailableError

logger = logging.getLogger(__name__)

__all__ = [
    "InMemoryPersistenceAdapter",
    "PersistenceAdapter",
    "SqlAlchemyPersistenceAdapter",
]

# Columns shared between ConsentRecord and the PrivacySettings table
_RECORD_FIELDS = tuple(ConsentRecord().to_dict())


class PersistenceAdapter(Protocol):
    """Durable storage for the single consent record."""

    def load(self) -> ConsentRecord | None:
        """Return the stored record, or None if none has been saved."""
        ...

    def save(self, record: ConsentRecord) -> None:
        """Overwrite the stored record."""
        ...


def _row_to_record(row: PrivacySettings) -> ConsentRecord:
    return ConsentRecord.from_dict({field: getattr(row, field) for field in _RECORD_FIELDS})


class SqlAlchemyPersistenceAdapter:
    """Stores the consent record as a single row in the ``privacy_settings`` table."""

    def load(self) -> ConsentRecord | None:
        """Load the stored record.

        Returns:
            The stored ConsentRecord, or None on first run.

        Raises:
            PersistenceUnavailableError: If the database cannot be read.
        """
        try:
            with get_session() as session:
                row = session.get(PrivacySettings, SETTINGS_ROW_ID)
                if row is None:
                    return None
                return _row_to_record(row)
        except SQLAlchemyError as exc:
            raise PersistenceUnavailableError(f"Failed to load privacy settings: {exc}") from exc

    def save(self, record: ConsentRecord) -> None:
        """Insert or overwrite the settings row.

        Raises:
            PersistenceUnavailableError: If the database cannot be written.
        """
        try:
            with get_session() as session:
                row = session.get(PrivacySettings, SETTINGS_ROW_ID)
                if row is None:
                    row = PrivacySettings(id=SETTINGS_ROW_ID)
                    session.add(row)
                for field, value in record.to_dict().items():
                    setattr(row, field, value)
        except SQLAlchemyError as exc:
            raise PersistenceUnavailableError(f"Failed to save privacy settings: {exc}") from exc
        logger.debug("Saved privacy settings: %s", record)


class InMemoryPersistenceAdapter:
    """Keeps the last saved record in memory.

    Set ``fail_loads`` or ``fail_saves`` to simulate an unreachable store.
    """

    def __init__(self, record: ConsentRecord | None = None) -> None:
        self._record = record
        self._lock = threading.Lock()
        self.fail_loads = False
        self.fail_saves = False
        self.save_count = 0

    @property
    def record(self) -> ConsentRecord | None:
        with self._lock:
            return self._record

    def load(self) -> ConsentRecord | None:
        if self.fail_loads:
            raise PersistenceUnavailableError("In-memory store is unavailable")
        with self._lock:
            return self._record

    def save(self, record: ConsentRecord) -> None:
        if self.fail_saves:
            raise PersistenceUnavailableError("In-memory store is unavailable")
        with self._lock:
            self._record = record
            self.save_count += 1
