from __future__ import annotations

from unittest.mock import patch

import pytest

from privacy_guard.cli import main


def test_status_on_fresh_install(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["status"]) == 0

    out = capsys.readouterr().out
    assert "Privacy policy accepted: no" in out
    assert "location_sharing" in out
    assert "✅ allowed" not in out


def test_accept_persists_between_runs(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["accept", "analytics"]) == 0
    capsys.readouterr()

    assert main(["status"]) == 0
    out = capsys.readouterr().out
    analytics_line = next(line for line in out.splitlines() if "analytics" in line)
    assert "✅ allowed" in analytics_line


def test_panic_on_denies_and_off_restores(capsys: pytest.CaptureFixture[str]) -> None:
    main(["accept", "eta_sharing"])
    main(["panic", "on"])
    capsys.readouterr()

    main(["status"])
    out = capsys.readouterr().out
    assert "Panic switch:            ON" in out
    assert "✅ allowed" not in out

    main(["panic", "off"])
    capsys.readouterr()
    main(["status"])
    eta_line = next(
        line for line in capsys.readouterr().out.splitlines() if "eta_sharing" in line
    )
    assert "✅ allowed" in eta_line


def test_accept_while_panicked_warns(capsys: pytest.CaptureFixture[str]) -> None:
    main(["panic", "on"])
    capsys.readouterr()

    assert main(["accept", "location_sharing"]) == 0

    assert "Panic switch is on" in capsys.readouterr().out


def test_revoke_and_reset(capsys: pytest.CaptureFixture[str]) -> None:
    main(["accept-policy"])
    main(["accept", "location_sharing"])
    main(["revoke", "location_sharing"])
    capsys.readouterr()

    main(["status"])
    assert "Privacy policy accepted: yes" in capsys.readouterr().out

    main(["reset"])
    capsys.readouterr()
    main(["status"])
    assert "Privacy policy accepted: no" in capsys.readouterr().out


def test_disclosure(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["disclosure", "friends_on_map"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Friends on Map")
    assert "Data collected:" in out


def test_prompt_declined_returns_error(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("easygui.buttonbox", return_value="No, Cancel"):
        assert main(["prompt", "analytics"]) == 1

    assert "Consent declined" in capsys.readouterr().out


def test_unknown_feature_is_rejected() -> None:
    with pytest.raises(SystemExit):
        main(["accept", "camera"])
