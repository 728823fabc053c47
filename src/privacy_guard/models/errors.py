"""Exception types raised by privacy_guard."""


class PrivacyGuardError(Exception):
    """Base class for all privacy_guard errors."""


class PersistenceUnavailableError(PrivacyGuardError):
    """Raised by a persistence adapter when the settings record cannot be loaded or saved."""


class UnknownFeatureError(PrivacyGuardError):
    """Raised when a privacy feature has no disclosure entry.

    This is a programming defect, not a runtime condition: the disclosure
    catalog is verified at import time.
    """
