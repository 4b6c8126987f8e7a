"""Logging pipeline driven by the modal store configuration."""

from __future__ import annotations

import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from modalkit.api.config import LoggingConfig, StoreConfig
from modalkit.diagnostics.json_codec import dumps_text
from modalkit.runtime.config import load_store_config

_QUEUE_LISTENER: QueueListener | None = None

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``modal_id`` extras are lifted to ``modal``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRIBUTES}
        modal_id = fields.pop("modal_id", None)
        if modal_id is not None:
            payload["modal"] = modal_id
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def logging_config_for(config: StoreConfig) -> LoggingConfig:
    """Translate store settings into a logging pipeline config."""
    return LoggingConfig(
        level_name=config.log_level,
        console_format=config.log_format,
        file_path=config.log_file,
        file_format="json",
    )


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers; a file sink is fed through a queue listener."""
    global _QUEUE_LISTENER

    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_level_number(config.level_name))

    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    if not config.file_path:
        root.addHandler(console)
        return

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(_formatter(config.file_format))

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _QUEUE_LISTENER = QueueListener(records, console, file_handler, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Stop the queue listener, flushing pending records."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def setup_logging(config: StoreConfig | None = None) -> bool:
    """Configure root logging from store config unless handlers already exist.

    Returns whether the root logger was configured.
    """
    if logging.getLogger().handlers:
        return False
    if config is None:
        config = load_store_config()
    configure_logging(logging_config_for(config))
    return True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _level_number(name: str) -> int:
    return logging.getLevelNamesMapping().get(name.strip().upper(), logging.INFO)


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
