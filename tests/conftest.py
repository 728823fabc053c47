from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

import privacy_guard.data.db as app_db
from privacy_guard.consent_store import ConsentStore
from privacy_guard.services.persistence import InMemoryPersistenceAdapter

# Test modules whose names contain one of these get a temporary database
_DB_TEST_KEYWORDS = ("api", "persistence", "cli")


@pytest.fixture
def privacy_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Point the data layer at a temporary SQLite database."""
    db_path = tmp_path / "privacy.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.reset_engine()
    app_db.init_db()
    yield db_path
    app_db.reset_engine()


@pytest.fixture
def adapter() -> InMemoryPersistenceAdapter:
    return InMemoryPersistenceAdapter()


@pytest.fixture
def store(adapter: InMemoryPersistenceAdapter) -> Iterator[ConsentStore]:
    """An initialized store backed by an empty in-memory adapter."""
    consent_store = ConsentStore(adapter)
    consent_store.initialize().result(timeout=5)
    yield consent_store
    consent_store.close()


@pytest.fixture(autouse=True)
def _auto_privacy_db(request: pytest.FixtureRequest) -> None:
    """Automatically add the privacy_db fixture to tests that touch the database."""
    stem = Path(str(request.node.fspath)).stem.lower()
    if any(keyword in stem for keyword in _DB_TEST_KEYWORDS):
        request.getfixturevalue("privacy_db")
