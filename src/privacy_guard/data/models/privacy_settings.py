"""ORM model for the persisted privacy settings record.

The table only ever holds one row (``id == SETTINGS_ROW_ID``); saving
overwrites it in place.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from privacy_guard.data.db import Base

SETTINGS_ROW_ID = 1


class PrivacySettings(Base):
    """Persisted representation of the user's consent flags.

    Attributes:
        id: Primary key, always ``SETTINGS_ROW_ID``.
        privacy_policy_accepted: Whether the privacy policy was accepted.
        location_sharing_accepted: Whether location sharing is allowed.
        friends_on_map_accepted: Whether friends on map is allowed.
        eta_sharing_accepted: Whether ETA sharing is allowed.
        analytics_accepted: Whether analytics collection is allowed.
        panic_switch_enabled: Whether the panic switch is on.
        updated_at: UTC timestamp of the last save.
    """

    __tablename__ = "privacy_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    privacy_policy_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    location_sharing_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    friends_on_map_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    eta_sharing_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    analytics_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    panic_switch_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
