"""Keyed overlay registry implementation."""

from __future__ import annotations

from modalkit.api.entries import (
    DEFAULT_ENTRY,
    EMPTY_PAYLOAD,
    ModalEntry,
    ModalPayload,
    freeze_payload,
)
from modalkit.api.store import Listener, StoreMetricsPort, StoreMetricsSnapshot, Unsubscribe
from modalkit.runtime.logging import get_logger

logger = get_logger(__name__)


class RuntimeModalRegistry:
    """In-process overlay registry with per-id listener sets.

    Entries are replaced on every write and listeners for the written id are
    notified synchronously, in registration order, once per call.
    """

    def __init__(self, *, trace_notifications: bool = False) -> None:
        self._entries: dict[str, ModalEntry] = {}
        self._listeners: dict[str, dict[int, Listener]] = {}
        self._next_id = 1
        self._trace = trace_notifications
        self._metrics_collector: StoreMetricsPort | None = None
        self._per_modal_counts = False

    def set_metrics_collector(
        self,
        metrics_collector: StoreMetricsPort | None,
        *,
        per_modal_counts_enabled: bool = False,
    ) -> None:
        """Attach optional metrics collector used for mutation/notify counts."""
        self._metrics_collector = metrics_collector
        self._per_modal_counts = bool(per_modal_counts_enabled)

    def get_entry(self, modal_id: str) -> ModalEntry:
        """Return stored entry or the shared default entry."""
        return self._entries.get(modal_id, DEFAULT_ENTRY)

    def show(self, modal_id: str, payload: ModalPayload | None = None) -> None:
        """Open overlay; a given payload replaces the stored one wholesale."""
        previous = self._entries.get(modal_id)
        if payload is not None:
            next_payload = freeze_payload(payload)
        elif previous is not None:
            next_payload = previous.payload
        else:
            next_payload = EMPTY_PAYLOAD
        self._write("show", modal_id, ModalEntry(open=True, payload=next_payload))

    def close(self, modal_id: str) -> None:
        """Close overlay; ids without an entry are left untouched."""
        previous = self._entries.get(modal_id)
        if previous is None:
            if self._trace:
                logger.debug("modal_close_ignored", extra={"modal_id": modal_id})
            return
        self._write("close", modal_id, ModalEntry(open=False, payload=previous.payload))

    def update(self, modal_id: str, partial: ModalPayload) -> None:
        """Shallow-merge partial payload; visibility is preserved."""
        previous = self._entries.get(modal_id, DEFAULT_ENTRY)
        merged = {**previous.payload, **partial}
        self._write("update", modal_id, ModalEntry(open=previous.open, payload=freeze_payload(merged)))

    def toggle(self, modal_id: str) -> None:
        if self.get_entry(modal_id).open:
            self.close(modal_id)
        else:
            self.show(modal_id)

    def subscribe(self, modal_id: str, listener: Listener) -> Unsubscribe:
        """Register listener for one overlay id and return its remover."""
        sub_id = self._next_id
        self._next_id += 1
        self._listeners.setdefault(modal_id, {})[sub_id] = listener

        def unsubscribe() -> None:
            listeners = self._listeners.get(modal_id)
            if listeners is not None:
                listeners.pop(sub_id, None)

        return unsubscribe

    def modal_ids(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def metrics_snapshot(self) -> StoreMetricsSnapshot:
        """Return counts from the attached collector, or an empty snapshot."""
        if self._metrics_collector is None:
            return StoreMetricsSnapshot()
        return self._metrics_collector.snapshot()

    def listener_count(self, modal_id: str) -> int:
        return len(self._listeners.get(modal_id, {}))

    def _write(self, operation: str, modal_id: str, entry: ModalEntry) -> None:
        self._entries[modal_id] = entry
        metrics = self._metrics_collector
        if metrics is not None:
            metrics.increment_mutation_count(operation)
        if self._trace:
            logger.debug(
                "modal_%s",
                operation,
                extra={"modal_id": modal_id, "open": entry.open, "payload_keys": sorted(entry.payload)},
            )
        self._notify(modal_id)

    def _notify(self, modal_id: str) -> None:
        # Snapshot so listeners may (un)subscribe or mutate re-entrantly.
        listeners = tuple(self._listeners.get(modal_id, {}).values())
        metrics = self._metrics_collector
        if metrics is not None and listeners:
            metrics.increment_notification_count(len(listeners))
            if self._per_modal_counts:
                metrics.increment_notification_modal(modal_id, len(listeners))
        if self._trace:
            logger.debug("modal_notify", extra={"modal_id": modal_id, "listeners": len(listeners)})
        for listener in listeners:
            listener()


ModalRegistry = RuntimeModalRegistry
