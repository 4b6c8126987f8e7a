"""Public overlay chrome contracts."""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from enum import StrEnum
from typing import Any, Protocol, TypeAlias

ChromeProps: TypeAlias = Mapping[str, Any]
ContentThunk: TypeAlias = Callable[[], Any]


class ChromeKey(StrEnum):
    """Payload keys consumed by modal and drawer chrome."""

    TITLE = "title"
    WIDTH = "width"
    HEIGHT = "height"
    FOOTER = "footer"
    OK_TEXT = "ok_text"
    CANCEL_TEXT = "cancel_text"
    ON_OK = "on_ok"
    ON_DISMISS = "on_dismiss"
    AFTER_CLOSE = "after_close"
    CONFIRM_LOADING = "confirm_loading"
    CENTERED = "centered"
    CLOSABLE = "closable"
    MASK = "mask"
    MASK_CLOSABLE = "mask_closable"
    KEYBOARD = "keyboard"
    DESTROY_ON_CLOSE = "destroy_on_close"
    FORCE_RENDER = "force_render"
    Z_INDEX = "z_index"
    PLACEMENT = "placement"
    CLASS_NAME = "class_name"
    STYLE = "style"
    BODY_STYLE = "body_style"
    OK_BUTTON_PROPS = "ok_button_props"
    CANCEL_BUTTON_PROPS = "cancel_button_props"
    ICON = "icon"


CHROME_KEYS: frozenset[str] = frozenset(key.value for key in ChromeKey)

# Owned by the boundary; never taken from payload or static config.
OPEN_PROP = "open"


class ChromeRenderer(Protocol):
    """Host-provided overlay shell renderer.

    ``props`` always carries ``open`` and ``on_dismiss``; ``content`` renders
    the overlay body inside the overlay scope when called.
    """

    def __call__(self, props: ChromeProps, content: ContentThunk) -> Any: ...


def partition_payload(
    payload: Mapping[str, Any],
    chrome_keys: Collection[str] = CHROME_KEYS,
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split payload into (chrome, opaque) key sets by allow-list membership."""
    chrome: dict[str, Any] = {}
    opaque: dict[str, Any] = {}
    for key, value in payload.items():
        if key in chrome_keys and key != OPEN_PROP:
            chrome[key] = value
        else:
            opaque[key] = value
    return chrome, opaque


def merge_chrome_props(
    config: Mapping[str, Any] | None,
    chrome: Mapping[str, Any],
    *,
    open: bool,
    on_dismiss: Callable[..., None],
) -> dict[str, Any]:
    """Merge chrome props, lowest to highest precedence.

    static config < payload chrome keys < ``open`` and ``on_dismiss``.
    """
    merged: dict[str, Any] = dict(config or {})
    merged.update(chrome)
    merged[OPEN_PROP] = bool(open)
    merged[ChromeKey.ON_DISMISS.value] = on_dismiss
    return merged


__all__ = [
    "CHROME_KEYS",
    "OPEN_PROP",
    "ChromeKey",
    "ChromeProps",
    "ChromeRenderer",
    "ContentThunk",
    "merge_chrome_props",
    "partition_payload",
]
