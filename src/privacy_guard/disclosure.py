"""Disclosure catalog for privacy features.

This module holds the fixed text shown in a consent sheet before the user
accepts a feature: a title, a description, the data collected, and how to
revoke. The table is keyed by ``PrivacyFeature`` and checked for
completeness when the module is imported, so a feature without a
disclosure fails at startup rather than at the moment a dialog is needed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from privacy_guard.constants.features import PrivacyFeature
from privacy_guard.models.errors import UnknownFeatureError


@dataclass(frozen=True)
class DisclosureEntry:
    """Human-readable disclosure for one privacy feature."""

    feature: PrivacyFeature
    title: str
    description: str
    data_collected: tuple[str, ...]
    how_to_revoke: str


DISCLOSURE_CATALOG: MappingProxyType[PrivacyFeature, DisclosureEntry] = MappingProxyType(
    {
        PrivacyFeature.LOCATION_SHARING: DisclosureEntry(
            feature=PrivacyFeature.LOCATION_SHARING,
            title="Location Sharing",
            description=(
                "We use your location to provide navigation services and show your "
                "position on the map. Your location is processed locally on your device "
                "and only shared when you explicitly choose to share your ETA or enable "
                "friends on map."
            ),
            data_collected=(
                "Your current location (latitude and longitude)",
                "Location accuracy and timestamp",
                "Location is processed locally on your device",
            ),
            how_to_revoke=(
                "Go to Settings > Privacy > Location Services and disable location access, "
                "or enable the panic switch to stop all sharing immediately."
            ),
        ),
        PrivacyFeature.FRIENDS_ON_MAP: DisclosureEntry(
            feature=PrivacyFeature.FRIENDS_ON_MAP,
            title="Friends on Map",
            description=(
                "This feature allows you to see your friends' locations on the map and "
                "share your location with them. Both you and your friends must opt-in to "
                "this feature. You can disable this at any time."
            ),
            data_collected=(
                "Your current location (when feature is enabled)",
                "Your friends' locations (when they opt-in)",
                "Location data is encrypted and shared only with selected friends",
            ),
            how_to_revoke=(
                "Go to Settings > Privacy > Friends on Map and disable this feature, "
                "or use the panic switch to stop all sharing immediately."
            ),
        ),
        PrivacyFeature.ETA_SHARING: DisclosureEntry(
            feature=PrivacyFeature.ETA_SHARING,
            title="ETA Sharing",
            description=(
                "When you share your ETA, we send your current location and estimated "
                "arrival time to the people you choose. This information is only shared "
                "for the duration of your trip and is automatically deleted after 1 hour."
            ),
            data_collected=(
                "Your current location",
                "Your destination",
                "Estimated arrival time",
                "Route information (start and end points only)",
            ),
            how_to_revoke=(
                "Stop any active ETA sharing sessions in the app, "
                "or use the panic switch to immediately end all sharing."
            ),
        ),
        PrivacyFeature.ANALYTICS: DisclosureEntry(
            feature=PrivacyFeature.ANALYTICS,
            title="Analytics",
            description=(
                "We collect anonymous usage data to improve the app. This includes app "
                "crashes, feature usage, and performance metrics. No personal information "
                "or precise location data is collected."
            ),
            data_collected=(
                "App usage statistics (anonymous)",
                "Feature usage patterns (anonymous)",
                "App performance metrics",
                "Crash reports (no personal data)",
            ),
            how_to_revoke=(
                "Go to Settings > Privacy > Analytics and disable this feature, "
                "or use the panic switch to stop all data collection."
            ),
        ),
    }
)


def verify_catalog(catalog: Mapping[PrivacyFeature, DisclosureEntry]) -> None:
    """Check that every feature has exactly one well-formed disclosure.

    Args:
        catalog: Mapping of feature to disclosure entry.

    Raises:
        UnknownFeatureError: If a feature is missing, an entry is filed under
            the wrong key, or an entry has no text.
    """
    missing = [feature.value for feature in PrivacyFeature if feature not in catalog]
    if missing:
        raise UnknownFeatureError(f"No disclosure entry for: {', '.join(missing)}")

    for feature, entry in catalog.items():
        if entry.feature is not feature:
            raise UnknownFeatureError(
                f"Disclosure for {entry.feature.value} is filed under {feature}"
            )
        if not (entry.title and entry.description and entry.how_to_revoke and entry.data_collected):
            raise UnknownFeatureError(f"Disclosure for {feature.value} is incomplete")


def disclosure_for(feature: PrivacyFeature) -> DisclosureEntry:
    """Return the disclosure shown before the user consents to ``feature``.

    Raises:
        UnknownFeatureError: If ``feature`` is not a PrivacyFeature.
    """
    try:
        return DISCLOSURE_CATALOG[feature]
    except KeyError:
        raise UnknownFeatureError(f"No disclosure entry for {feature!r}") from None


verify_catalog(DISCLOSURE_CATALOG)
