"""Modal store runtime modules."""

from modalkit.api.entries import ModalEntry
from modalkit.runtime.binding import EntryBinding
from modalkit.runtime.boundary import RuntimeModalBoundary
from modalkit.runtime.config import load_store_config, resolve_log_level_name
from modalkit.runtime.control import RuntimeModalControl
from modalkit.runtime.logging import (
    configure_logging,
    get_logger,
    logging_config_for,
    setup_logging,
    shutdown_logging,
)
from modalkit.runtime.metrics import (
    NoopStoreMetrics,
    StoreMetricsCollector,
    StoreMetricsSnapshot,
    create_store_metrics,
)
from modalkit.runtime.registry import ModalRegistry, RuntimeModalRegistry

__all__ = [
    "EntryBinding",
    "ModalEntry",
    "ModalRegistry",
    "NoopStoreMetrics",
    "RuntimeModalBoundary",
    "RuntimeModalControl",
    "RuntimeModalRegistry",
    "StoreMetricsCollector",
    "StoreMetricsSnapshot",
    "configure_logging",
    "create_store_metrics",
    "get_logger",
    "load_store_config",
    "logging_config_for",
    "resolve_log_level_name",
    "setup_logging",
    "shutdown_logging",
]
