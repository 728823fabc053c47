"""Value types describing a user's consent state.

``ConsentRecord`` is the single authoritative settings record owned by the
``ConsentStore``. It is frozen so that snapshots handed to observers and
feature code can never be mutated behind the store's back.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from privacy_guard.constants.features import PrivacyFeature


@dataclass(frozen=True, slots=True)
class ConsentRecord:
    """Snapshot of every consent flag plus the panic switch.

    Attributes:
        privacy_policy_accepted: Whether the user accepted the privacy policy.
        location_sharing_accepted: Whether location use is permitted.
        friends_on_map_accepted: Whether the user opted in to friends on map.
        eta_sharing_accepted: Whether ETA broadcast is permitted.
        analytics_accepted: Whether anonymous analytics may be collected.
        panic_switch_enabled: Global override; when set every feature is denied.
    """

    privacy_policy_accepted: bool = False
    location_sharing_accepted: bool = False
    friends_on_map_accepted: bool = False
    eta_sharing_accepted: bool = False
    analytics_accepted: bool = False
    panic_switch_enabled: bool = False

    def with_changes(self, **changes: bool) -> ConsentRecord:
        """Return a copy of this record with the given flags replaced."""
        return replace(self, **changes)

    def is_accepted(self, feature: PrivacyFeature) -> bool:
        """Return the raw consent flag for a feature, ignoring panic and dependencies."""
        return getattr(self, feature.consent_field)

    def to_dict(self) -> dict[str, bool]:
        """Return the record as a plain dictionary keyed by field name."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConsentRecord:
        """Build a record from a dictionary.

        Missing keys default to ``False`` and unknown keys are ignored, so a
        partial stored record still fails safe.
        """
        return cls(**{f.name: bool(data.get(f.name, False)) for f in fields(cls)})


@dataclass(frozen=True, slots=True)
class PrivacySummary:
    """Display summary of the feature flags shown on the privacy settings screen."""

    location_sharing: bool
    friends_on_map: bool
    eta_sharing: bool
    analytics: bool
    panic_switch: bool

    @classmethod
    def from_record(cls, record: ConsentRecord) -> PrivacySummary:
        return cls(
            location_sharing=record.location_sharing_accepted,
            friends_on_map=record.friends_on_map_accepted,
            eta_sharing=record.eta_sharing_accepted,
            analytics=record.analytics_accepted,
            panic_switch=record.panic_switch_enabled,
        )
