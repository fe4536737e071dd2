"""Pytest configuration and fixtures."""

import logging

import pytest

from testsets.stack import get_testset_depth, pop_testset


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Drop handlers added to the testsets logger so tests don't leak log files."""
    yield

    logger = logging.getLogger("testsets")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def empty_stack():
    """Every test starts and ends with no active test set in the main context."""
    while get_testset_depth():
        pop_testset()
    yield
    while get_testset_depth():
        pop_testset()


@pytest.fixture
def quiet():
    """Options for outermost test sets that should not print a summary table."""
    return {"show_summary": False}
