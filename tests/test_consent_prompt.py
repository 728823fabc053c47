from __future__ import annotations

from unittest.mock import patch

from privacy_guard.consent_prompt import AGREE, CANCEL, DECLINE, ENABLE_PANIC, ConsentPrompt
from privacy_guard.consent_store import ConsentStore
from privacy_guard.constants.features import PrivacyFeature
from privacy_guard.disclosure import disclosure_for


def test_format_disclosure_lists_collected_data(store: ConsentStore) -> None:
    prompt = ConsentPrompt(store)
    text = prompt.format_disclosure(disclosure_for(PrivacyFeature.ANALYTICS))

    assert "Data collected:" in text
    assert "• Crash reports (no personal data)" in text
    assert "How to stop:" in text


def test_request_consent_agree_records_consent(store: ConsentStore) -> None:
    prompt = ConsentPrompt(store)

    with patch("easygui.buttonbox", return_value=AGREE) as buttonbox:
        result = prompt.request_consent(PrivacyFeature.ETA_SHARING)

    assert result is True
    assert store.can_use_feature(PrivacyFeature.ETA_SHARING) is True
    assert buttonbox.call_args.kwargs["title"] == "ETA Sharing"


def test_request_consent_decline_leaves_store_unchanged(store: ConsentStore) -> None:
    prompt = ConsentPrompt(store)

    with patch("easygui.buttonbox", return_value=DECLINE):
        result = prompt.request_consent(PrivacyFeature.ANALYTICS)

    assert result is False
    assert store.summary().analytics_accepted is False


def test_request_consent_closed_dialog_counts_as_decline(store: ConsentStore) -> None:
    prompt = ConsentPrompt(store)

    with patch("easygui.buttonbox", return_value=None):
        assert prompt.request_consent(PrivacyFeature.ANALYTICS) is False


def test_request_consent_warns_when_panicked(store: ConsentStore) -> None:
    store.enable_panic_switch()
    prompt = ConsentPrompt(store)

    with patch("easygui.buttonbox", return_value=AGREE), patch("easygui.msgbox") as msgbox:
        assert prompt.request_consent(PrivacyFeature.LOCATION_SHARING) is True

    msgbox.assert_called_once()
    assert store.summary().location_sharing_accepted is True
    assert store.can_use_feature(PrivacyFeature.LOCATION_SHARING) is False


def test_request_privacy_policy(store: ConsentStore) -> None:
    prompt = ConsentPrompt(store)

    with patch("easygui.buttonbox", return_value=DECLINE):
        assert prompt.request_privacy_policy() is False
    assert store.summary().privacy_policy_accepted is False

    with patch("easygui.buttonbox", return_value=AGREE):
        assert prompt.request_privacy_policy() is True
    assert store.summary().privacy_policy_accepted is True


def test_toggle_panic_switch_requires_confirmation(store: ConsentStore) -> None:
    prompt = ConsentPrompt(store)

    with patch("easygui.buttonbox", return_value=CANCEL):
        assert prompt.toggle_panic_switch() is False
    assert store.is_panicked() is False

    with patch("easygui.buttonbox", return_value=ENABLE_PANIC):
        assert prompt.toggle_panic_switch() is True
    assert store.is_panicked() is True


def test_toggle_panic_switch_disables_without_confirmation(store: ConsentStore) -> None:
    store.accept_analytics()
    store.enable_panic_switch()
    prompt = ConsentPrompt(store)

    with patch("easygui.buttonbox") as buttonbox, patch("easygui.msgbox"):
        assert prompt.toggle_panic_switch() is False

    buttonbox.assert_not_called()
    assert store.is_panicked() is False
    assert store.can_use_feature(PrivacyFeature.ANALYTICS) is True
