"""Data models and type definitions"""

from privacy_guard.models.consent import ConsentRecord, PrivacySummary
from privacy_guard.models.errors import (
    PersistenceUnavailableError,
    PrivacyGuardError,
    UnknownFeatureError,
)

__all__ = [
    "ConsentRecord",
    "PersistenceUnavailableError",
    "PrivacyGuardError",
    "PrivacySummary",
    "UnknownFeatureError",
]
