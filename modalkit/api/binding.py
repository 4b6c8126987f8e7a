"""Public external-store binding contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from modalkit.api.entries import ModalEntry
from modalkit.api.store import Listener, ModalStore, Unsubscribe


class ExternalStoreBinding(Protocol):
    """Subscribe/get-snapshot pair for one overlay id."""

    @property
    def modal_id(self) -> str:
        """Bound overlay id."""

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register listener for the bound id."""

    def get_snapshot(self) -> ModalEntry:
        """Return current entry for the bound id."""

    def get_server_snapshot(self) -> ModalEntry:
        """Return entry used for non-interactive renders."""

    def watch(self, on_change: Callable[[ModalEntry], None]) -> Unsubscribe:
        """Invoke on_change only when the snapshot reference changes."""


def create_entry_binding(store: ModalStore, modal_id: str) -> ExternalStoreBinding:
    """Create default per-id binding adapter."""
    from modalkit.runtime.binding import EntryBinding

    return EntryBinding(store, modal_id)


__all__ = ["ExternalStoreBinding", "create_entry_binding"]
