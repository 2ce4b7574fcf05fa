from __future__ import annotations

import atexit
from datetime import datetime, timezone
from enum import Enum
import hashlib
import json
import logging
import logging.handlers
import os
from pathlib import Path
import queue
from typing import Final

_LOGGER_NAME: Final[str] = "text_translator"
_LOG_FILE_NAME: Final[str] = "translator.log"
_LOG_DIR_ENV: Final[str] = "TRANSLATOR_LOG_DIR"
_LOG_ENABLED_ENV: Final[str] = "TRANSLATOR_LOGGING"
_FIELDS_ATTR: Final[str] = "telemetry_fields"
_logger: logging.Logger | None = None
_listener: logging.handlers.QueueListener | None = None
_file_handler: logging.Handler | None = None


class TelemetryEvent(Enum):
    TRANSLATION_REQUEST = "translation.request"
    TRANSLATION_SUCCESS = "translation.success"
    TRANSLATION_FAILED = "translation.failed"
    TRANSLATION_VALIDATION_FAILED = "translation.validation_failed"
    TRANSLATION_STALE_DISCARDED = "translation.stale_discarded"
    HISTORY_LOAD_FAILED = "history.load_failed"
    HISTORY_PERSIST_FAILED = "history.persist_failed"
    HISTORY_EXPORTED = "history.exported"
    HISTORY_EXPORT_FAILED = "history.export_failed"
    SPEECH_FAILED = "speech.failed"
    CLIPBOARD_FAILED = "clipboard.failed"
    SHARE_FAILED = "share.failed"


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, event name, then fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname.lower(),
            "event": record.getMessage(),
        }
        fields = getattr(record, _FIELDS_ATTR, None)
        if isinstance(fields, dict):
            payload.update(fields)
        return json.dumps(payload, ensure_ascii=True, separators=(",", ":"))


def log_path() -> Path:
    override = os.environ.get(_LOG_DIR_ENV, "").strip()
    if override:
        return Path(override) / _LOG_FILE_NAME
    return Path.home() / ".text-translator" / "logs" / _LOG_FILE_NAME


def setup() -> None:
    """Attach the append-only JSON-lines file sink once per process.

    Disabled when ``TRANSLATOR_LOGGING=0``. An unwritable log directory leaves
    telemetry off instead of failing the caller.
    """
    global _logger, _listener, _file_handler
    if _logger is not None or not _is_enabled():
        return
    path = log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError:
        return
    file_handler.setFormatter(JsonLineFormatter())
    record_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.addHandler(logging.handlers.QueueHandler(record_queue))
    listener = logging.handlers.QueueListener(record_queue, file_handler)
    listener.start()
    _logger = logger
    _listener = listener
    _file_handler = file_handler
    atexit.register(shutdown)


def enable_console(level: int = logging.DEBUG) -> None:
    """Mirror library loggers (``translate_core.*``) to stderr for --verbose runs."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    core_logger = logging.getLogger("translate_core")
    core_logger.setLevel(level)
    core_logger.addHandler(handler)


def shutdown() -> None:
    global _logger, _listener, _file_handler
    if _listener is not None:
        _listener.stop()
        _listener = None
    if _file_handler is not None:
        _file_handler.close()
        _file_handler = None
    if _logger is not None:
        _logger.handlers.clear()
        _logger = None


def log_event(event: TelemetryEvent, **fields: object) -> None:
    _emit(logging.INFO, event, fields)


def log_error(
    event: TelemetryEvent, exc: BaseException | None = None, **fields: object
) -> None:
    if exc is not None:
        fields = {**_error_fields(exc), **fields}
    _emit(logging.ERROR, event, fields)


def text_meta(value: str | None) -> dict[str, object]:
    """Length and digest of user text; the text itself is never logged."""
    if not value:
        return {"text_len": 0, "text_hash": ""}
    digest = hashlib.sha256(value.encode("utf-8", errors="ignore")).hexdigest()
    return {"text_len": len(value), "text_hash": digest}


def _emit(level: int, event: TelemetryEvent, fields: dict[str, object]) -> None:
    setup()
    logger = _logger
    if logger is None or not logger.isEnabledFor(level):
        return
    logger.log(level, event.value, extra={_FIELDS_ATTR: _sanitize_fields(fields)})


def _error_fields(exc: BaseException) -> dict[str, object]:
    fields: dict[str, object] = {
        "error_type": exc.__class__.__name__,
        "error": str(exc),
    }
    cause = exc.__cause__
    if cause is not None:
        fields["cause_type"] = cause.__class__.__name__
        fields["cause"] = str(cause)
    return fields


def _is_enabled() -> bool:
    return os.environ.get(_LOG_ENABLED_ENV, "1").strip() != "0"


def _sanitize_fields(fields: dict[str, object]) -> dict[str, object]:
    sanitized: dict[str, object] = {}
    for key, value in fields.items():
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, (str, int, float, bool)) or value is None:
            sanitized[key] = value
        else:
            sanitized[key] = str(value)
    return sanitized
