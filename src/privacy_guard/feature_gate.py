"""Feature gate: turns a consent record into an allow/deny decision."""

from __future__ import annotations

from privacy_guard.constants.features import PrivacyFeature
from privacy_guard.models.consent import ConsentRecord


def can_use(feature: PrivacyFeature, record: ConsentRecord) -> bool:
    """Return whether ``feature`` is currently authorized by ``record``.

    The panic switch overrides everything. Friends on map additionally
    requires location sharing, since friends cannot see a location the app
    is not allowed to use.

    Args:
        feature: The capability being requested.
        record: Consent snapshot to evaluate.

    Returns:
        True if the feature may be used, False otherwise.
    """
    if record.panic_switch_enabled:
        return False

    match feature:
        case PrivacyFeature.LOCATION_SHARING:
            return record.location_sharing_accepted
        case PrivacyFeature.FRIENDS_ON_MAP:
            return record.friends_on_map_accepted and record.location_sharing_accepted
        case PrivacyFeature.ETA_SHARING:
            return record.eta_sharing_accepted
        case PrivacyFeature.ANALYTICS:
            return record.analytics_accepted

    # Unknown values are denied
    return False


def allowed_features(record: ConsentRecord) -> dict[PrivacyFeature, bool]:
    """Evaluate every feature against ``record``."""
    return {feature: can_use(feature, record) for feature in PrivacyFeature}
