"""Public modal entry shapes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

ModalPayload: TypeAlias = Mapping[str, Any]

EMPTY_PAYLOAD: ModalPayload = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ModalEntry:
    """Visibility flag plus configuration payload for one overlay id.

    Entries are never mutated; every store write produces a new instance, so
    identity comparison against the previous snapshot detects change.
    """

    open: bool = False
    payload: ModalPayload = field(default_factory=lambda: EMPTY_PAYLOAD)


DEFAULT_ENTRY = ModalEntry()


def freeze_payload(payload: ModalPayload | None) -> ModalPayload:
    """Return a read-only copy of payload."""
    if not payload:
        return EMPTY_PAYLOAD
    return MappingProxyType(dict(payload))


__all__ = ["DEFAULT_ENTRY", "EMPTY_PAYLOAD", "ModalEntry", "ModalPayload", "freeze_payload"]
