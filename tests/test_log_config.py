"""Tests for server logging configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from etcd_workbench.config import RuntimeConfig
from etcd_workbench.log_config import ISO8601Formatter, configure_logging, get_server_log_path


@pytest.fixture
def app_logger() -> Iterator[logging.Logger]:
    """Restore the application logger after configure_logging() changes it."""
    logger = logging.getLogger("etcd-workbench")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


class TestISO8601Formatter:
    """Tests for the JSONL formatter."""

    def test_dict_message(self) -> None:
        record = logging.LogRecord("etcd-workbench", logging.WARNING, __file__, 1, {"event": "x", "message": "m"}, None, None)

        entry = json.loads(ISO8601Formatter().format(record))

        assert entry["event"] == "x"
        assert entry["message"] == "m"
        assert entry["level"] == "WARNING"
        assert entry["time"].endswith("Z")

    def test_plain_message(self) -> None:
        record = logging.LogRecord("etcd-workbench", logging.INFO, __file__, 1, "hello %s", ("world",), None)

        entry = json.loads(ISO8601Formatter().format(record))

        assert entry["message"] == "hello world"


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_log_path(self, tmp_path: Path) -> None:
        config = RuntimeConfig(data_dir=str(tmp_path))

        assert get_server_log_path(config) == tmp_path / "logs" / "server.jsonl"

    def test_warnings_written_to_file(self, tmp_path: Path, app_logger: logging.Logger) -> None:
        config = RuntimeConfig(data_dir=str(tmp_path))

        configure_logging(config)
        logging.getLogger("etcd-workbench.api.errors").warning({"event": "probe", "message": "probe warning"})
        logging.getLogger("etcd-workbench.api.errors").info({"event": "noise", "message": "info only"})
        for handler in app_logger.handlers:
            handler.flush()

        lines = get_server_log_path(config).read_text(encoding="utf-8").splitlines()
        events = [json.loads(line)["event"] for line in lines]
        assert events == ["probe"]

    def test_reconfigure_does_not_duplicate_handlers(self, tmp_path: Path, app_logger: logging.Logger) -> None:
        config = RuntimeConfig(data_dir=str(tmp_path))

        configure_logging(config)
        configure_logging(config)

        assert len(app_logger.handlers) == 2

    def test_unknown_level_falls_back_to_info(self, tmp_path: Path, app_logger: logging.Logger) -> None:
        configure_logging(RuntimeConfig(data_dir=str(tmp_path), log_level="chatty"))

        stderr_handler = app_logger.handlers[0]
        assert stderr_handler.level == logging.INFO
