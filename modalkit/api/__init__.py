"""Public modal store API contracts."""

from modalkit.api.binding import ExternalStoreBinding, create_entry_binding
from modalkit.api.boundary import ModalBoundary, create_modal_boundary
from modalkit.api.chrome import (
    CHROME_KEYS,
    ChromeKey,
    ChromeProps,
    ChromeRenderer,
    merge_chrome_props,
    partition_payload,
)
from modalkit.api.config import LoggingConfig, StoreConfig, load_store_config
from modalkit.api.control import ModalControl, create_modal_control
from modalkit.api.entries import DEFAULT_ENTRY, ModalEntry, ModalPayload
from modalkit.api.errors import MissingScopeError, ModalKitError
from modalkit.api.scope import (
    ModalScope,
    current_modal_scope,
    modal_scope,
    provide_modal_store,
    require_modal_store,
    use_modal_control,
    use_modal_options,
)
from modalkit.api.store import (
    Listener,
    ModalStore,
    StoreMetricsSnapshot,
    Unsubscribe,
    create_modal_store,
)

__all__ = [
    "CHROME_KEYS",
    "ChromeKey",
    "ChromeProps",
    "ChromeRenderer",
    "DEFAULT_ENTRY",
    "ExternalStoreBinding",
    "Listener",
    "LoggingConfig",
    "MissingScopeError",
    "ModalBoundary",
    "ModalControl",
    "ModalEntry",
    "ModalKitError",
    "ModalPayload",
    "ModalScope",
    "ModalStore",
    "StoreConfig",
    "StoreMetricsSnapshot",
    "Unsubscribe",
    "create_entry_binding",
    "create_modal_boundary",
    "create_modal_control",
    "create_modal_store",
    "current_modal_scope",
    "load_store_config",
    "merge_chrome_props",
    "modal_scope",
    "partition_payload",
    "provide_modal_store",
    "require_modal_store",
    "use_modal_control",
    "use_modal_options",
]
