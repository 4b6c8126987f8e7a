"""Store configuration sourced from environment."""

from __future__ import annotations

import os
from typing import Mapping

from modalkit.api.config import StoreConfig

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return bool(default)


def resolve_log_level_name(
    default: str = "INFO",
    *,
    env: Mapping[str, str] | None = None,
) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("MODALKIT_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_store_config(*, env: Mapping[str, str] | None = None) -> StoreConfig:
    """Load immutable store configuration from env vars."""
    return StoreConfig(
        log_level=resolve_log_level_name(env=env),
        log_format=(_raw("MODALKIT_LOG_FORMAT", env=env) or "text").strip().lower(),
        log_file=(_raw("MODALKIT_LOG_FILE", env=env) or "").strip() or None,
        trace_notifications=_flag("MODALKIT_TRACE_NOTIFICATIONS", False, env=env),
        metrics_enabled=_flag("MODALKIT_METRICS", False, env=env),
        metrics_per_modal=_flag("MODALKIT_METRICS_PER_MODAL", False, env=env),
    )


__all__ = ["load_store_config", "resolve_log_level_name"]
