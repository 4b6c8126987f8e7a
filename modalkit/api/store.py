"""Public modal store API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias

from modalkit.api.config import StoreConfig
from modalkit.api.entries import ModalEntry, ModalPayload

Listener: TypeAlias = Callable[[], None]
Unsubscribe: TypeAlias = Callable[[], None]


@dataclass(frozen=True, slots=True)
class StoreMetricsSnapshot:
    """Read-only metrics snapshot."""

    mutation_counts: dict[str, int] = field(default_factory=dict)
    notification_count: int = 0
    notifications_by_modal: dict[str, int] = field(default_factory=dict)


class StoreMetricsPort(Protocol):
    """Optional metrics sink fed by store mutations."""

    def increment_mutation_count(self, operation: str, count: int = 1) -> None: ...

    def increment_notification_count(self, count: int = 1) -> None: ...

    def increment_notification_modal(self, modal_id: str, count: int = 1) -> None: ...

    def snapshot(self) -> StoreMetricsSnapshot: ...


class ModalStore(Protocol):
    """Keyed overlay registry shared by the whole UI tree."""

    def get_entry(self, modal_id: str) -> ModalEntry:
        """Return stored entry or the shared default entry."""

    def show(self, modal_id: str, payload: ModalPayload | None = None) -> None:
        """Open overlay; a given payload replaces the stored one."""

    def close(self, modal_id: str) -> None:
        """Close overlay if it has an entry."""

    def update(self, modal_id: str, partial: ModalPayload) -> None:
        """Shallow-merge partial payload without changing visibility."""

    def toggle(self, modal_id: str) -> None:
        """Close when open, else show with the stored payload."""

    def subscribe(self, modal_id: str, listener: Listener) -> Unsubscribe:
        """Register listener for one overlay id."""

    def modal_ids(self) -> tuple[str, ...]:
        """Return ids that hold an entry, in creation order."""

    def metrics_snapshot(self) -> StoreMetricsSnapshot:
        """Return collected metrics; empty when metrics are disabled."""


def create_modal_store(*, config: StoreConfig | None = None) -> ModalStore:
    """Create default modal store implementation.

    ``config`` defaults to the environment-derived store config.
    """
    from modalkit.runtime.config import load_store_config
    from modalkit.runtime.metrics import create_store_metrics
    from modalkit.runtime.registry import RuntimeModalRegistry

    resolved = config if config is not None else load_store_config()
    registry = RuntimeModalRegistry(trace_notifications=resolved.trace_notifications)
    if resolved.metrics_enabled:
        registry.set_metrics_collector(
            create_store_metrics(enabled=True),
            per_modal_counts_enabled=resolved.metrics_per_modal,
        )
    return registry


__all__ = [
    "Listener",
    "ModalStore",
    "StoreMetricsPort",
    "StoreMetricsSnapshot",
    "Unsubscribe",
    "create_modal_store",
]
