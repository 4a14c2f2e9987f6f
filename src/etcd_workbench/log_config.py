"""Server logging configuration.

Owns the etcd-workbench logger configuration (handlers, formatters).
Other modules get their own logger reference via:
    _logger = logging.getLogger(f"{APP_NAME}.<module>")

Log records carry dict messages ({"event": ..., "message": ..., ...}).
The console shows the human-readable message; the JSONL file keeps the
whole record with an ISO 8601 timestamp.
"""

from __future__ import annotations

__all__ = [
    "ISO8601Formatter",
    "configure_logging",
    "get_server_log_path",
]

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from etcd_workbench.config import RuntimeConfig
from etcd_workbench.constants import APP_NAME

_logger = logging.getLogger(APP_NAME)


class _ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict):
            msg = record.msg.get("message") or record.msg.get("event", "")
            text = f"{record.levelname}: {msg}"
        else:
            # getMessage() substitutes %s placeholders with args
            text = f"{record.levelname}: {record.getMessage()}"
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


class ISO8601Formatter(logging.Formatter):
    """JSONL formatter with ISO 8601 timestamps (UTC).

    Format: {"time": "2025-12-04T10:48:37.123Z", "level": "ERROR", ...}
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )

        if isinstance(record.msg, dict):
            log_data = record.msg
        else:
            log_data = {"message": record.getMessage()}

        log_entry = {"time": timestamp, "level": record.levelname, **log_data}
        if record.exc_info:
            log_entry["traceback"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def get_server_log_path(config: RuntimeConfig) -> Path:
    """Get full path to the server log file (<data_dir>/logs/server.jsonl)."""
    return Path(config.data_dir) / "logs" / "server.jsonl"


def configure_logging(config: RuntimeConfig) -> None:
    """Configure server logging.

    Sets up:
    - stderr handler: config.log_level and above
    - file handler: WARNING+ only (errors and issues worth reviewing)

    Args:
        config: Runtime configuration with data directory and log level.
    """
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    # Close and clear any existing handlers to avoid resource leaks
    for handler in _logger.handlers:
        handler.close()
    _logger.handlers.clear()
    _logger.setLevel(min(level, logging.WARNING))
    _logger.propagate = False

    stderr_handler = logging.StreamHandler()
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(_ConsoleFormatter())
    _logger.addHandler(stderr_handler)

    # Quiet uvicorn, requests are logged by us where it matters
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    log_path = get_server_log_path(config)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    except OSError as e:
        _logger.warning(
            {
                "event": "file_logging_failed",
                "message": f"Failed to configure file logging, using stderr only: {e}",
                "error_type": type(e).__name__,
                "error_message": str(e),
            }
        )
        return

    file_handler.setLevel(logging.WARNING)
    file_handler.setFormatter(ISO8601Formatter())
    _logger.addHandler(file_handler)
