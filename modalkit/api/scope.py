"""Ambient store and overlay scopes for code rendered inside a boundary.

Two context variables back the scopes:

* the *store scope* carries the single shared :class:`ModalStore` handed to
  the UI tree once at startup (:func:`provide_modal_store`);
* the *modal scope* carries the overlay id a presentation boundary is
  currently rendering content for (:func:`modal_scope`).

Readers that run outside the matching scope raise :class:`MissingScopeError`;
there is no default store or overlay id.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar, cast

from modalkit.api.binding import create_entry_binding
from modalkit.api.entries import ModalPayload
from modalkit.api.errors import MissingScopeError
from modalkit.api.store import ModalStore

if TYPE_CHECKING:
    from modalkit.api.control import ModalControl


@dataclass(frozen=True, slots=True)
class ModalScope:
    """Overlay id plus the store it belongs to."""

    store: ModalStore
    modal_id: str


_ACTIVE_STORE: ContextVar[ModalStore | None] = ContextVar("modalkit_active_store", default=None)
_ACTIVE_SCOPE: ContextVar[ModalScope | None] = ContextVar("modalkit_active_scope", default=None)


@contextmanager
def provide_modal_store(store: ModalStore) -> Iterator[ModalStore]:
    """Make store the shared store for the enclosed block."""
    token = _ACTIVE_STORE.set(store)
    try:
        yield store
    finally:
        _ACTIVE_STORE.reset(token)


def require_modal_store() -> ModalStore:
    """Return the provided store or raise MissingScopeError."""
    store = _ACTIVE_STORE.get()
    if store is None:
        raise MissingScopeError("modal store lookup")
    return store


@contextmanager
def modal_scope(store: ModalStore, modal_id: str) -> Iterator[ModalScope]:
    """Bind the ambient overlay id for content rendered in the block."""
    scope = ModalScope(store=store, modal_id=modal_id)
    token = _ACTIVE_SCOPE.set(scope)
    try:
        yield scope
    finally:
        _ACTIVE_SCOPE.reset(token)


def current_modal_scope() -> ModalScope:
    """Return the ambient overlay scope or raise MissingScopeError."""
    scope = _ACTIVE_SCOPE.get()
    if scope is None:
        raise MissingScopeError("modal configuration reader")
    return scope


TOptions = TypeVar("TOptions")


def use_modal_options(shape: type[TOptions] | None = None) -> TOptions:
    """Return the ambient overlay payload, typed as ``shape``.

    ``shape`` is only used for typing (for example a ``TypedDict``); no
    validation happens and missing keys are simply absent.
    """
    _ = shape
    scope = current_modal_scope()
    payload: ModalPayload = create_entry_binding(scope.store, scope.modal_id).get_snapshot().payload
    return cast(TOptions, payload)


def use_modal_control(defaults: ModalPayload | None = None) -> ModalControl:
    """Return a control handle for the ambient overlay."""
    from modalkit.api.control import create_modal_control

    scope = current_modal_scope()
    return create_modal_control(scope.modal_id, defaults, store=scope.store)


__all__ = [
    "ModalScope",
    "current_modal_scope",
    "modal_scope",
    "provide_modal_store",
    "require_modal_store",
    "use_modal_control",
    "use_modal_options",
]
