"""Consent store: the single owner of the user's consent record.

All reads and writes of consent state go through ``ConsentStore``:

- Mutations apply to the in-memory record synchronously and never wait on I/O.
- Every mutation schedules a full-record save on a single background worker,
  so saves reach the adapter in the order the mutations were applied.
- Observers are called with the complete new record once the in-memory
  state reflects the mutation.
- Nothing is saved until the stored record has been loaded, so an early
  mutation never overwrites stored consent.
- The panic switch flips the in-memory flag first, then fires the host's
  stop-sharing hooks outside the lock. Persistence failures never undo it.

The store is constructed once by the host and passed to whoever needs it.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from enum import StrEnum

from privacy_guard.constants.features import PrivacyFeature
from privacy_guard.disclosure import DisclosureEntry, disclosure_for
from privacy_guard.feature_gate import can_use
from privacy_guard.models.consent import ConsentRecord, PrivacySummary
from privacy_guard.models.errors import PersistenceUnavailableError
from privacy_guard.services.persistence import PersistenceAdapter

logger = logging.getLogger(__name__)

Observer = Callable[[ConsentRecord], None]
StopSharingHook = Callable[[], None]
Transform = Callable[[ConsentRecord], ConsentRecord]


class PanicState(StrEnum):
    """States of the panic switch."""

    NORMAL = "normal"
    PANICKED = "panicked"


class _LoadPhase(StrEnum):
    NOT_STARTED = "not_started"
    LOADING = "loading"
    LOADED = "loaded"


class ConsentStore:
    """Authoritative, single-writer holder of the consent record.

    Until ``initialize()`` has finished loading, every flag reads as False.
    Mutations made before the load completes, including before
    ``initialize()`` is called, are held back from storage and replayed on
    top of the loaded record instead of overwriting it.

    Args:
        persistence: Adapter used to load and save the record.
        executor: Optional executor for persistence work. When omitted the
            store creates (and owns) a single-worker thread pool.
    """

    def __init__(
        self,
        persistence: PersistenceAdapter,
        *,
        executor: Executor | None = None,
    ) -> None:
        self._persistence = persistence
        self._record = ConsentRecord()
        self._lock = threading.RLock()
        self._observers: list[Observer] = []
        self._stop_sharing_hooks: list[StopSharingHook] = []
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="privacy-guard-io"
        )
        self._pending: list[Future] = []
        self._phase = _LoadPhase.NOT_STARTED
        self._load_future: Future[ConsentRecord] | None = None
        self._journal: list[Transform] = []

    # ------------------------------------------------------------------ #
    #  Lifecycle                                                          #
    # ------------------------------------------------------------------ #

    def initialize(self) -> Future[ConsentRecord]:
        """Load the stored record in the background.

        Observers are notified exactly once when the load completes. A missing
        record or a failed load leaves every flag False.

        Returns:
            Future resolving to the record in effect after the load. Calling
            this again returns the same future.
        """
        with self._lock:
            if self._load_future is None:
                self._phase = _LoadPhase.LOADING
                self._load_future = self._executor.submit(self._load)
                self._pending.append(self._load_future)
            return self._load_future

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for queued persistence work to finish.

        Args:
            timeout: Maximum seconds to wait, or None to wait indefinitely.

        Returns:
            True if all queued work finished, False if the timeout expired.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            with self._lock:
                self._pending = [future for future in self._pending if not future.done()]
                pending = list(self._pending)
            if not pending:
                return True
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            _, not_done = wait(pending, timeout=remaining)
            if not_done:
                return False

    def close(self) -> None:
        """Flush pending saves and release the worker thread if the store owns it."""
        with self._lock:
            if self._phase is _LoadPhase.NOT_STARTED and self._journal:
                logger.warning(
                    "Closing before initialize(); %d privacy change(s) were not saved",
                    len(self._journal),
                )
        self.flush()
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> ConsentStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    #  Subscriptions                                                      #
    # ------------------------------------------------------------------ #

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` to receive the full record after every change.

        Returns:
            A callable that removes the observer.
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def add_stop_sharing_hook(self, hook: StopSharingHook) -> Callable[[], None]:
        """Register a hook that stops active sharing when the panic switch is enabled.

        Returns:
            A callable that removes the hook.
        """
        with self._lock:
            self._stop_sharing_hooks.append(hook)

        def remove() -> None:
            with self._lock:
                if hook in self._stop_sharing_hooks:
                    self._stop_sharing_hooks.remove(hook)

        return remove

    # ------------------------------------------------------------------ #
    #  Queries                                                            #
    # ------------------------------------------------------------------ #

    def summary(self) -> ConsentRecord:
        """Return a read-only snapshot of the current record."""
        with self._lock:
            return self._record

    def privacy_summary(self) -> PrivacySummary:
        """Return the feature flags and panic state for display."""
        return PrivacySummary.from_record(self.summary())

    def can_use_feature(self, feature: PrivacyFeature) -> bool:
        """Return whether ``feature`` is authorized right now."""
        return can_use(feature, self.summary())

    def disclosure_for(self, feature: PrivacyFeature) -> DisclosureEntry:
        """Return the disclosure to show before asking consent for ``feature``."""
        return disclosure_for(feature)

    def is_panicked(self) -> bool:
        return self.summary().panic_switch_enabled

    @property
    def panic_state(self) -> PanicState:
        return PanicState.PANICKED if self.is_panicked() else PanicState.NORMAL

    # ------------------------------------------------------------------ #
    #  Mutations                                                          #
    # ------------------------------------------------------------------ #

    def accept_privacy_policy(self) -> None:
        self._set_flags("accept privacy policy", privacy_policy_accepted=True)

    def accept_location_sharing(self) -> None:
        self._set_flags("accept location sharing", location_sharing_accepted=True)

    def accept_friends_on_map(self) -> None:
        self._set_flags("accept friends on map", friends_on_map_accepted=True)

    def accept_eta_sharing(self) -> None:
        self._set_flags("accept ETA sharing", eta_sharing_accepted=True)

    def accept_analytics(self) -> None:
        self._set_flags("accept analytics", analytics_accepted=True)

    def accept(self, feature: PrivacyFeature) -> None:
        """Record consent for ``feature``."""
        feature = PrivacyFeature(feature)
        self._set_flags(f"accept {feature.value}", **{feature.consent_field: True})

    def revoke_consent(self, feature: PrivacyFeature) -> None:
        """Withdraw consent for ``feature``.

        The privacy policy is not a feature and cannot be revoked here.
        """
        feature = PrivacyFeature(feature)
        self._set_flags(f"revoke {feature.value}", **{feature.consent_field: False})

    def enable_panic_switch(self) -> None:
        """Deny every feature and tell collaborators to stop sharing.

        The hooks fire on every call, including when the switch is already on,
        because the sharing they stop is state this store cannot observe. They
        run after the store lock is released, so a slow hook never stalls
        readers on other threads.
        """
        with self._lock:
            if self._record.panic_switch_enabled:
                logger.warning("Panic switch re-enabled while already active")
            self._apply(
                lambda record: record.with_changes(panic_switch_enabled=True),
                "enable panic switch",
            )
            hooks = list(self._stop_sharing_hooks)

        self._fire_stop_sharing_hooks(hooks)

    def disable_panic_switch(self) -> None:
        """Turn the panic switch off.

        Per-feature consent is left exactly as it is; nothing is restored.
        """
        self._set_flags("disable panic switch", panic_switch_enabled=False)

    def reset(self) -> None:
        """Overwrite the record with a fresh all-False record."""
        self._apply(lambda _record: ConsentRecord(), "reset privacy settings")

    # ------------------------------------------------------------------ #
    #  Internals                                                          #
    # ------------------------------------------------------------------ #

    def _set_flags(self, action: str, **changes: bool) -> None:
        self._apply(lambda record: record.with_changes(**changes), action)

    def _apply(self, transform: Transform, action: str) -> None:
        with self._lock:
            self._record = transform(self._record)
            record = self._record
            logger.info("Privacy settings changed (%s)", action)

            if self._phase is not _LoadPhase.LOADED:
                # Replayed onto the loaded record, which is then saved once
                self._journal.append(transform)
            else:
                self._schedule_save(record)

            self._notify(record)

    def _schedule_save(self, record: ConsentRecord) -> None:
        try:
            future = self._executor.submit(self._save, record)
        except RuntimeError:
            logger.warning("Persistence worker is shut down; privacy settings not saved")
            return
        self._pending.append(future)

    def _save(self, record: ConsentRecord) -> None:
        try:
            self._persistence.save(record)
        except PersistenceUnavailableError as exc:
            logger.warning("Failed to persist privacy settings: %s", exc)
        except Exception:
            logger.exception("Unexpected error while persisting privacy settings")

    def _load(self) -> ConsentRecord:
        loaded: ConsentRecord | None = None
        try:
            loaded = self._persistence.load()
        except PersistenceUnavailableError as exc:
            logger.warning("Failed to load privacy settings, denying all features: %s", exc)
        except Exception:
            logger.exception("Unexpected error while loading privacy settings")

        with self._lock:
            record = loaded if loaded is not None else ConsentRecord()
            journal, self._journal = self._journal, []
            for transform in journal:
                record = transform(record)

            self._record = record
            self._phase = _LoadPhase.LOADED
            if journal:
                self._schedule_save(record)

            self._notify(record)
            return record

    def _fire_stop_sharing_hooks(self, hooks: list[StopSharingHook]) -> None:
        for hook in hooks:
            try:
                hook()
            except Exception:
                logger.exception("Stop-sharing hook %r failed", hook)

    def _notify(self, record: ConsentRecord) -> None:
        # Runs under the lock so delivery follows mutation order.
        # Observers must return quickly.
        for observer in list(self._observers):
            try:
                observer(record)
            except Exception:
                logger.exception("Privacy settings observer %r failed", observer)
