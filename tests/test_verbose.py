"""Tests for logging setup."""

import logging
from pathlib import Path

from testsets.aggregating import AggregatingTestSet
from testsets.results import Pass
from testsets.verbose import setup_logger


def test_logger_creates_debug_log(tmp_path: Path):
    debug_file = tmp_path / "logs" / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_to_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    assert len(logger.handlers) == 2
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert "FileHandler" in handler_types
    assert "StreamHandler" in handler_types


def test_no_outputs_installs_null_handler():
    logger = setup_logger(verbose=False, logger_name="testsets_null_check")
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]


def test_repeated_setup_replaces_handlers(tmp_path: Path):
    setup_logger(debug_file=tmp_path / "one.log", verbose=True)
    logger = setup_logger(debug_file=tmp_path / "two.log", verbose=False)
    assert len(logger.handlers) == 1


def test_package_modules_log_through_configured_logger(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file=debug_file)

    ts = AggregatingTestSet("logged", verbose=True)
    ts.record(Pass("1 == 1"))

    content = debug_file.read_text()
    assert "[logged] Test Passed: 1 == 1" in content
