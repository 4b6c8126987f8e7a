"""In-memory metrics collector for modal store activity."""

from __future__ import annotations

from modalkit.api.store import StoreMetricsSnapshot


class NoopStoreMetrics:
    """No-op collector for zero-impact disabled mode."""

    def increment_mutation_count(self, operation: str, count: int = 1) -> None:
        _ = (operation, count)

    def increment_notification_count(self, count: int = 1) -> None:
        _ = count

    def increment_notification_modal(self, modal_id: str, count: int = 1) -> None:
        _ = (modal_id, count)

    def snapshot(self) -> StoreMetricsSnapshot:
        return StoreMetricsSnapshot()


class StoreMetricsCollector:
    """Counts store mutations by operation and listener notifications."""

    def __init__(self) -> None:
        self._mutation_counts: dict[str, int] = {}
        self._notification_count = 0
        self._notifications_by_modal: dict[str, int] = {}

    def increment_mutation_count(self, operation: str, count: int = 1) -> None:
        normalized = str(operation).strip()
        if not normalized:
            return
        self._mutation_counts[normalized] = self._mutation_counts.get(normalized, 0) + int(count)

    def increment_notification_count(self, count: int = 1) -> None:
        self._notification_count += int(count)

    def increment_notification_modal(self, modal_id: str, count: int = 1) -> None:
        self._notifications_by_modal[modal_id] = (
            self._notifications_by_modal.get(modal_id, 0) + int(count)
        )

    def reset(self) -> None:
        self._mutation_counts = {}
        self._notification_count = 0
        self._notifications_by_modal = {}

    def snapshot(self) -> StoreMetricsSnapshot:
        return StoreMetricsSnapshot(
            mutation_counts=dict(self._mutation_counts),
            notification_count=self._notification_count,
            notifications_by_modal=dict(self._notifications_by_modal),
        )


def create_store_metrics(*, enabled: bool) -> StoreMetricsCollector | NoopStoreMetrics:
    """Factory returning enabled collector or no-op implementation."""
    if not enabled:
        return NoopStoreMetrics()
    return StoreMetricsCollector()
