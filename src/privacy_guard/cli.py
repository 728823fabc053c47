from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from privacy_guard.config import get_settings
from privacy_guard.consent_prompt import ConsentPrompt
from privacy_guard.consent_store import ConsentStore
from privacy_guard.constants.features import PrivacyFeature
from privacy_guard.feature_gate import allowed_features
from privacy_guard.services.persistence import SqlAlchemyPersistenceAdapter

FEATURE_CHOICES = [feature.value for feature in PrivacyFeature]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="privacy-guard",
        description="Inspect and change privacy consent settings.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("status", help="Show consent flags and which features are allowed")
    commands.add_parser("accept-policy", help="Accept the privacy policy")
    commands.add_parser("reset", help="Reset all privacy settings to their defaults")

    for name, help_text in (
        ("disclosure", "Show what a feature collects and how to stop it"),
        ("accept", "Allow a feature"),
        ("revoke", "Withdraw consent for a feature"),
        ("prompt", "Show the consent dialog for a feature"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("feature", choices=FEATURE_CHOICES)

    panic = commands.add_parser("panic", help="Turn the panic switch on or off")
    panic.add_argument("state", choices=["on", "off"])

    return parser


def print_status(store: ConsentStore) -> None:
    """Print the current consent flags and gate decisions."""
    record = store.summary()
    print("Privacy Status")
    print("-" * 40)
    print(f"Privacy policy accepted: {'yes' if record.privacy_policy_accepted else 'no'}")
    print(f"Panic switch:            {'ON' if record.panic_switch_enabled else 'off'}")
    print()
    for feature, allowed in allowed_features(record).items():
        consent = "accepted" if record.is_accepted(feature) else "not accepted"
        print(f"  {feature.value:<18} {consent:<14} {'✅ allowed' if allowed else '❌ denied'}")


def print_disclosure(store: ConsentStore, feature: PrivacyFeature) -> None:
    entry = store.disclosure_for(feature)
    print(entry.title)
    print("=" * len(entry.title))
    print(entry.description)
    print()
    print("Data collected:")
    for item in entry.data_collected:
        print(f"  • {item}")
    print()
    print(f"How to stop: {entry.how_to_revoke}")


def build_store() -> ConsentStore:
    """Create the application's consent store and load the saved record."""
    store = ConsentStore(SqlAlchemyPersistenceAdapter())
    store.initialize().result()
    return store


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run one command against the consent store.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    with build_store() as store:
        command = args.command
        if command == "status":
            print_status(store)
        elif command == "disclosure":
            print_disclosure(store, PrivacyFeature(args.feature))
        elif command == "accept-policy":
            store.accept_privacy_policy()
            print("✅ Privacy policy accepted.")
        elif command == "accept":
            store.accept(PrivacyFeature(args.feature))
            print(f"✅ {args.feature} allowed.")
            if store.is_panicked():
                print("⚠️  Panic switch is on; the feature stays denied until it is disabled.")
        elif command == "revoke":
            store.revoke_consent(PrivacyFeature(args.feature))
            print(f"✅ {args.feature} revoked.")
        elif command == "prompt":
            if not ConsentPrompt(store).request_consent(PrivacyFeature(args.feature)):
                print("❌ Consent declined.")
                return 1
            print(f"✅ {args.feature} allowed.")
        elif command == "panic":
            if args.state == "on":
                store.enable_panic_switch()
                print("🛑 Panic switch enabled. All sharing stopped.")
            else:
                store.disable_panic_switch()
                print("Panic switch disabled. Re-enable each feature to resume sharing.")
        elif command == "reset":
            store.reset()
            print("✅ Privacy settings reset.")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except Exception as exc:
        print(f"\n❌ Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
