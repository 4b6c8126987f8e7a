"""Public modal store configuration shapes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Immutable store configuration."""

    log_level: str = "INFO"
    log_format: str = "text"  # text|json
    log_file: str | None = None
    trace_notifications: bool = False
    metrics_enabled: bool = False
    metrics_per_modal: bool = False


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def load_store_config() -> StoreConfig:
    """Load store configuration from environment variables."""
    from modalkit.runtime.config import load_store_config as runtime_load

    return runtime_load()


__all__ = ["LoggingConfig", "StoreConfig", "load_store_config"]
