"""Per-id binding adapter between the registry and a reactive host."""

from __future__ import annotations

from collections.abc import Callable

from modalkit.api.entries import ModalEntry
from modalkit.api.store import Listener, ModalStore, Unsubscribe


class EntryBinding:
    """External-store style view of one overlay id."""

    __slots__ = ("_modal_id", "_store")

    def __init__(self, store: ModalStore, modal_id: str) -> None:
        self._store = store
        self._modal_id = modal_id

    @property
    def modal_id(self) -> str:
        return self._modal_id

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._store.subscribe(self._modal_id, listener)

    def get_snapshot(self) -> ModalEntry:
        return self._store.get_entry(self._modal_id)

    def get_server_snapshot(self) -> ModalEntry:
        # The registry is process-local, so server renders see live state.
        return self._store.get_entry(self._modal_id)

    def watch(self, on_change: Callable[[ModalEntry], None]) -> Unsubscribe:
        """Call on_change with the new entry whenever its reference changes."""
        last = self.get_snapshot()

        def listener() -> None:
            nonlocal last
            current = self.get_snapshot()
            if current is last:
                return
            last = current
            on_change(current)

        return self.subscribe(listener)
