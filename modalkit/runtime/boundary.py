"""Presentation boundary implementation."""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from typing import Any, cast

from modalkit.api.chrome import (
    CHROME_KEYS,
    ChromeKey,
    ChromeRenderer,
    merge_chrome_props,
    partition_payload,
)
from modalkit.api.entries import ModalEntry, ModalPayload
from modalkit.api.scope import modal_scope
from modalkit.api.store import ModalStore, Unsubscribe
from modalkit.runtime.binding import EntryBinding
from modalkit.runtime.logging import get_logger

logger = get_logger(__name__)


class RuntimeModalBoundary:
    """Renders overlay chrome for one id and scopes its content."""

    def __init__(
        self,
        store: ModalStore,
        modal_id: str,
        *,
        renderer: ChromeRenderer,
        children: Callable[[], Any] | None = None,
        render: Callable[[ModalPayload], Any] | None = None,
        config: Mapping[str, Any] | None = None,
        chrome_keys: Collection[str] = CHROME_KEYS,
    ) -> None:
        if not modal_id:
            raise ValueError("modal id must not be empty")
        if (children is None) == (render is None):
            raise ValueError("exactly one of children or render is required")
        self._store = store
        self._modal_id = modal_id
        self._renderer = renderer
        self._children = children
        self._render_fn = render
        self._config: dict[str, Any] = dict(config or {})
        self._chrome_keys = frozenset(chrome_keys)
        self._binding = EntryBinding(store, modal_id)

    @property
    def modal_id(self) -> str:
        return self._modal_id

    def render(self) -> Any:
        return self._render_entry(self._binding.get_snapshot())

    def mount(self, on_render: Callable[[Any], None] | None = None) -> Unsubscribe:
        """Render now, then again on every entry change for this id only."""

        def rerender(entry: ModalEntry) -> None:
            output = self._render_entry(entry)
            if on_render is not None:
                on_render(output)

        unsubscribe = self._binding.watch(rerender)
        try:
            rerender(self._binding.get_snapshot())
        except BaseException:
            unsubscribe()
            raise
        return unsubscribe

    def props_for(self, entry: ModalEntry) -> dict[str, Any]:
        """Return merged chrome props for entry."""
        chrome, _ = partition_payload(entry.payload, self._chrome_keys)
        caller_dismiss = chrome.get(ChromeKey.ON_DISMISS, self._config.get(ChromeKey.ON_DISMISS))
        return merge_chrome_props(
            self._config,
            chrome,
            open=entry.open,
            on_dismiss=self._dismiss_handler(caller_dismiss),
        )

    def _render_entry(self, entry: ModalEntry) -> Any:
        props = self.props_for(entry)
        payload = entry.payload

        def content() -> Any:
            with modal_scope(self._store, self._modal_id):
                if self._render_fn is not None:
                    return self._render_fn(payload)
                return cast(Callable[[], Any], self._children)()

        return self._renderer(props, content)

    def _dismiss_handler(self, caller_dismiss: Any) -> Callable[..., None]:
        def on_dismiss(*args: Any, **kwargs: Any) -> None:
            logger.debug("modal_dismiss", extra={"modal_id": self._modal_id})
            try:
                if callable(caller_dismiss):
                    caller_dismiss(*args, **kwargs)
            finally:
                self._store.close(self._modal_id)

        return on_dismiss
