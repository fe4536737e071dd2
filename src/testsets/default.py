"""Fallback test set that aborts on the first failure."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from testsets.base import AbstractTestSet
from testsets.errors import TestingAborted
from testsets.results import Pass

if TYPE_CHECKING:
    from testsets.aggregating import TestSetSummary
    from testsets.results import ResultKind

logger = logging.getLogger(__name__)


class DefaultTestSet(AbstractTestSet):
    """Stateless, fail-fast test set used when no other test set is active.

    There is exactly one instance, ``default_testset``; it is the implicit
    bottom of every context's stack and is never pushed or popped.
    """

    _instance: DefaultTestSet | None = None

    def __new__(cls) -> DefaultTestSet:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def record(self, result: ResultKind | TestSetSummary) -> ResultKind | TestSetSummary:
        from testsets.aggregating import TestSetSummary

        if isinstance(result, Pass):
            return result
        if isinstance(result, TestSetSummary):
            if result.all_passed:
                return result
            logger.error("%s", TestingAborted.from_summary(result))
            raise TestingAborted("There was an error during testing", summary=result)
        logger.error("%s", result)
        raise TestingAborted("There was an error during testing", result=result)

    def finish(self) -> None:
        return None

    def __repr__(self) -> str:
        return "DefaultTestSet()"


default_testset = DefaultTestSet()
