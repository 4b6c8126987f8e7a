"""Public modal store exception types."""

from __future__ import annotations


class ModalKitError(Exception):
    """Base error for modal store misuse."""


class MissingScopeError(ModalKitError, LookupError):
    """Raised when a scoped lookup runs outside its provider or boundary."""

    def __init__(self, what: str) -> None:
        super().__init__(f"{what} used outside of its scope")
        self.what = what


__all__ = ["MissingScopeError", "ModalKitError"]
