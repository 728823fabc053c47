"""Constants package for privacy_guard."""

from privacy_guard.constants.features import CONSENT_FIELDS, PrivacyFeature

__all__ = ["CONSENT_FIELDS", "PrivacyFeature"]
