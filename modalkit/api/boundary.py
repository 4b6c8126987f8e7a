"""Public presentation boundary contracts."""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from typing import Any, Protocol

from modalkit.api.chrome import CHROME_KEYS, ChromeRenderer
from modalkit.api.entries import ModalPayload
from modalkit.api.store import ModalStore, Unsubscribe


class ModalBoundary(Protocol):
    """Declarative placement point for one overlay id."""

    @property
    def modal_id(self) -> str:
        """Rendered overlay id."""

    def render(self) -> Any:
        """Render chrome and scoped content for the current entry."""

    def mount(self, on_render: Callable[[Any], None] | None = None) -> Unsubscribe:
        """Render now and re-render when this id's entry changes."""


def create_modal_boundary(
    modal_id: str,
    *,
    renderer: ChromeRenderer,
    children: Callable[[], Any] | None = None,
    render: Callable[[ModalPayload], Any] | None = None,
    config: Mapping[str, Any] | None = None,
    chrome_keys: Collection[str] = CHROME_KEYS,
    store: ModalStore | None = None,
) -> ModalBoundary:
    """Create default presentation boundary.

    Exactly one of ``children`` (reads the payload through
    :func:`modalkit.api.scope.use_modal_options`) or ``render`` (receives the
    full payload) must be given.
    """
    from modalkit.api.scope import require_modal_store
    from modalkit.runtime.boundary import RuntimeModalBoundary

    resolved = store if store is not None else require_modal_store()
    return RuntimeModalBoundary(
        resolved,
        modal_id,
        renderer=renderer,
        children=children,
        render=render,
        config=config,
        chrome_keys=chrome_keys,
    )


__all__ = ["ModalBoundary", "create_modal_boundary"]
