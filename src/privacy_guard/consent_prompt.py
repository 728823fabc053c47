"""Consent dialogs for privacy features.

This module renders the disclosure for a feature in a dialog and, when the
user agrees, records consent through the ``ConsentStore``. It also provides
the confirmation dialog for the panic switch.
"""

from __future__ import annotations

import easygui as eg

from privacy_guard.consent_store import ConsentStore
from privacy_guard.constants.features import PrivacyFeature
from privacy_guard.disclosure import DisclosureEntry

AGREE = "Yes I agree"
DECLINE = "No, Cancel"
ENABLE_PANIC = "Enable Panic Switch"
CANCEL = "Cancel"


class ConsentPrompt:
    """Shows consent dialogs and forwards the user's decisions to a ConsentStore.

    Attributes:
        store: The consent store that records decisions.
        policy_title: Title of the privacy policy dialog.
        policy_text: Privacy policy summary shown before the first feature consent.
        panic_text: Warning shown before the panic switch is enabled.
    """

    def __init__(self, store: ConsentStore) -> None:
        self.store = store
        self.policy_title: str = "Privacy Policy"
        self.policy_text: str = """Before you continue, please review how we handle your data.

• Location is only used for features you turn on
• Sharing with friends or contacts always requires your opt-in
• Analytics are anonymous and optional
• You can revoke any permission at any time in Settings > Privacy
• The panic switch stops all sharing immediately

Please choose "Yes I agree" to proceed or "No, Cancel" to exit."""
        self.panic_text: str = (
            "This will immediately stop all data sharing and disable all privacy "
            "features. You can disable it later in settings."
        )

    def get_user_consent(self, text: str, title: str, choices: list[str]) -> bool:
        """Display a consent dialog and return whether the first choice was picked.

        Args:
            text: Dialog body.
            title: Dialog title.
            choices: Button labels; the first one means "agree".

        Returns:
            True if the user picked the first choice, False otherwise
            (including closing the dialog).
        """
        choice = eg.buttonbox(text, title=title, choices=choices)
        return choice == choices[0]

    def format_disclosure(self, entry: DisclosureEntry) -> str:
        """Render a disclosure entry as dialog text."""
        collected = "\n".join(f"• {item}" for item in entry.data_collected)
        return (
            f"{entry.description}\n\n"
            f"Data collected:\n{collected}\n\n"
            f"How to stop: {entry.how_to_revoke}"
        )

    def request_privacy_policy(self) -> bool:
        """Ask the user to accept the privacy policy.

        Returns:
            True if the policy was accepted.
        """
        if not self.get_user_consent(self.policy_text, self.policy_title, [AGREE, DECLINE]):
            return False
        self.store.accept_privacy_policy()
        return True

    def request_consent(self, feature: PrivacyFeature) -> bool:
        """Show the disclosure for ``feature`` and record consent if the user agrees.

        Returns:
            True if consent was given, False if the user declined.
        """
        entry = self.store.disclosure_for(feature)
        if not self.get_user_consent(self.format_disclosure(entry), entry.title, [AGREE, DECLINE]):
            return False

        self.store.accept(feature)
        if self.store.is_panicked():
            eg.msgbox(
                f"{entry.title} was allowed, but the panic switch is on. "
                "Disable the panic switch to start sharing again.",
                title="Panic Switch Active",
            )
        return True

    def toggle_panic_switch(self) -> bool:
        """Disable the panic switch if it is on, otherwise confirm and enable it.

        Returns:
            Whether the panic switch is on afterwards.
        """
        if self.store.is_panicked():
            self.store.disable_panic_switch()
            eg.msgbox(
                "Panic switch disabled. Turn each feature back on to resume sharing.",
                title="Panic Switch",
            )
            return False

        if self.get_user_consent(self.panic_text, "Panic Switch", [ENABLE_PANIC, CANCEL]):
            self.store.enable_panic_switch()
            return True
        return False
