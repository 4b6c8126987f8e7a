"""Public imperative overlay control contracts."""

from __future__ import annotations

from typing import Protocol

from modalkit.api.entries import ModalPayload
from modalkit.api.store import ModalStore


class ModalControl(Protocol):
    """Per-id imperative handle forwarding to the shared store."""

    @property
    def modal_id(self) -> str:
        """Controlled overlay id."""

    @property
    def open(self) -> bool:
        """Live visibility of the controlled overlay."""

    @property
    def options(self) -> ModalPayload:
        """Live payload of the controlled overlay."""

    def show_modal(self, payload: ModalPayload | None = None) -> None:
        """Open with defaults merged under the runtime payload."""

    def close_modal(self) -> None:
        """Close the overlay."""

    def toggle_modal(self) -> None:
        """Close when open, else open with the captured defaults."""

    def set_options(self, partial: ModalPayload) -> None:
        """Merge partial payload without changing visibility."""


def create_modal_control(
    modal_id: str,
    defaults: ModalPayload | None = None,
    *,
    store: ModalStore | None = None,
) -> ModalControl:
    """Create default control handle.

    Without an explicit ``store`` the store provided to the current scope is
    used; see :func:`modalkit.api.scope.provide_modal_store`.
    """
    from modalkit.api.scope import require_modal_store
    from modalkit.runtime.control import RuntimeModalControl

    resolved = store if store is not None else require_modal_store()
    return RuntimeModalControl(resolved, modal_id, defaults)


__all__ = ["ModalControl", "create_modal_control"]
