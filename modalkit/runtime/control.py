"""Imperative overlay control handle implementation."""

from __future__ import annotations

from modalkit.api.entries import ModalPayload, freeze_payload
from modalkit.api.store import ModalStore
from modalkit.runtime.binding import EntryBinding


class RuntimeModalControl:
    """Forwards show/close/toggle/update for one id to the shared store."""

    def __init__(
        self,
        store: ModalStore,
        modal_id: str,
        defaults: ModalPayload | None = None,
    ) -> None:
        if not modal_id:
            raise ValueError("modal id must not be empty")
        self._store = store
        self._modal_id = modal_id
        self._defaults = None if defaults is None else freeze_payload(defaults)
        self._binding = EntryBinding(store, modal_id)

    @property
    def modal_id(self) -> str:
        return self._modal_id

    @property
    def defaults(self) -> ModalPayload | None:
        return self._defaults

    @property
    def open(self) -> bool:
        return self._binding.get_snapshot().open

    @property
    def options(self) -> ModalPayload:
        return self._binding.get_snapshot().payload

    def show_modal(self, payload: ModalPayload | None = None) -> None:
        if self._defaults is None and payload is None:
            self._store.show(self._modal_id, None)
            return
        self._store.show(self._modal_id, {**(self._defaults or {}), **(payload or {})})

    def close_modal(self) -> None:
        self._store.close(self._modal_id)

    def toggle_modal(self) -> None:
        # Re-open uses the captured defaults, never the last runtime payload.
        if self._binding.get_snapshot().open:
            self.close_modal()
        else:
            self.show_modal()

    def set_options(self, partial: ModalPayload) -> None:
        self._store.update(self._modal_id, partial)
