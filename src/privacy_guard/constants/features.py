"""Privacy feature taxonomy.

Every privacy-sensitive capability that feature code may ask about is a
member of ``PrivacyFeature``. The enumeration is closed: the gate, the
disclosure catalog and the store all key off it.
"""

from __future__ import annotations

from enum import StrEnum


class PrivacyFeature(StrEnum):
    """Capabilities that require explicit user consent."""

    LOCATION_SHARING = "location_sharing"
    FRIENDS_ON_MAP = "friends_on_map"
    ETA_SHARING = "eta_sharing"
    ANALYTICS = "analytics"

    @property
    def consent_field(self) -> str:
        """Name of the ConsentRecord flag that records consent for this feature."""
        return CONSENT_FIELDS[self]


# Feature -> ConsentRecord attribute
CONSENT_FIELDS: dict[PrivacyFeature, str] = {
    PrivacyFeature.LOCATION_SHARING: "location_sharing_accepted",
    PrivacyFeature.FRIENDS_ON_MAP: "friends_on_map_accepted",
    PrivacyFeature.ETA_SHARING: "eta_sharing_accepted",
    PrivacyFeature.ANALYTICS: "analytics_accepted",
}
