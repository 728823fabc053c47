"""Tests for consent value types."""

from __future__ import annotations

import dataclasses

import pytest

from privacy_guard.constants.features import CONSENT_FIELDS, PrivacyFeature
from privacy_guard.models.consent import ConsentRecord, PrivacySummary


def test_default_record_is_all_false() -> None:
    assert all(value is False for value in ConsentRecord().to_dict().values())
    assert len(ConsentRecord().to_dict()) == 6


def test_record_is_immutable() -> None:
    record = ConsentRecord()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.analytics_accepted = True  # type: ignore[misc]


def test_with_changes_leaves_original_untouched() -> None:
    record = ConsentRecord()
    updated = record.with_changes(eta_sharing_accepted=True)

    assert updated.eta_sharing_accepted is True
    assert record.eta_sharing_accepted is False
    assert updated.with_changes(eta_sharing_accepted=True) == updated


def test_from_dict_defaults_missing_keys_and_ignores_unknown() -> None:
    record = ConsentRecord.from_dict({"analytics_accepted": True, "legacy_flag": True})

    assert record == ConsentRecord(analytics_accepted=True)


def test_dict_round_trip() -> None:
    record = ConsentRecord(
        privacy_policy_accepted=True,
        friends_on_map_accepted=True,
        panic_switch_enabled=True,
    )
    assert ConsentRecord.from_dict(record.to_dict()) == record


def test_every_feature_maps_to_a_record_field() -> None:
    field_names = {field.name for field in dataclasses.fields(ConsentRecord)}
    assert set(CONSENT_FIELDS) == set(PrivacyFeature)
    for feature in PrivacyFeature:
        assert feature.consent_field in field_names


def test_is_accepted_reads_raw_flag() -> None:
    record = ConsentRecord(friends_on_map_accepted=True, panic_switch_enabled=True)
    assert record.is_accepted(PrivacyFeature.FRIENDS_ON_MAP) is True
    assert record.is_accepted(PrivacyFeature.LOCATION_SHARING) is False


def test_feature_values() -> None:
    assert PrivacyFeature.LOCATION_SHARING.value == "location_sharing"
    assert PrivacyFeature.FRIENDS_ON_MAP.value == "friends_on_map"
    assert PrivacyFeature.ETA_SHARING.value == "eta_sharing"
    assert PrivacyFeature.ANALYTICS.value == "analytics"


def test_privacy_summary_from_record() -> None:
    record = ConsentRecord(
        privacy_policy_accepted=True,
        location_sharing_accepted=True,
        analytics_accepted=True,
        panic_switch_enabled=True,
    )
    summary = PrivacySummary.from_record(record)

    assert summary == PrivacySummary(
        location_sharing=True,
        friends_on_map=False,
        eta_sharing=False,
        analytics=True,
        panic_switch=True,
    )
