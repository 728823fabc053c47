"""Services"""

from privacy_guard.services.persistence import (
    InMemoryPersistenceAdapter,
    PersistenceAdapter,
    SqlAlchemyPersistenceAdapter,
)

__all__ = [
    "InMemoryPersistenceAdapter",
    "PersistenceAdapter",
    "SqlAlchemyPersistenceAdapter",
]
