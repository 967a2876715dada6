import logging
from pathlib import Path

import pytest

from lsystems.utilities.logging import get_logger


def test_get_logger_writes_rotating_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Loggers log to stderr and to one file per logger name."""
    monkeypatch.setenv("LSYSTEMS_LOG_DIR", str(tmp_path))
    logger = get_logger("lsystems.tests.file_output")

    logger.info("grew %s nodes", 12)
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "lsystems_tests_file_output.log"
    assert "grew 12 nodes" in log_file.read_text()
    assert logger.propagate is False


def test_get_logger_reuses_handlers(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LSYSTEMS_LOG_DIR", str(tmp_path))

    first = get_logger("lsystems.tests.reuse")
    second = get_logger("lsystems.tests.reuse")

    assert first is second
    assert len(second.handlers) == 2


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LSYSTEMS_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    logger = get_logger("lsystems.tests.level")

    assert logger.level == logging.DEBUG
