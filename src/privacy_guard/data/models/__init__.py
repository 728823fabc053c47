"""ORM models package for database tables.

- PrivacySettings: the single persisted consent record

All models inherit from the shared Base declarative class defined in data.db.
"""

from privacy_guard.data.db import Base
from privacy_guard.data.models.privacy_settings import SETTINGS_ROW_ID, PrivacySettings

__all__ = ["Base", "PrivacySettings", "SETTINGS_ROW_ID"]
