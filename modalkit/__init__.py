"""Keyed overlay state store: registry, bindings and presentation boundary."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modalkit.api.store import ModalStore


def create_store() -> "ModalStore":
    """Create the application-wide modal store with environment config.

    Root logging is configured from the same config when nothing else has
    installed handlers yet.
    """
    from modalkit.api.config import load_store_config
    from modalkit.api.store import create_modal_store
    from modalkit.runtime.logging import setup_logging

    config = load_store_config()
    setup_logging(config)
    return create_modal_store(config=config)


__all__ = ["create_store"]
