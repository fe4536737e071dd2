"""Test set that stores every result and reports failures only at the top."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Iterator, Union

from testsets.base import AbstractTestSet
from testsets.config import TestSetOptions, make_options
from testsets.errors import TestingAborted, TestSetFinishedError
from testsets.metrics import DurationStatistics, compute_stats
from testsets.reporting import build_reporters
from testsets.results import Error, Fail, Pass, ResultKind
from testsets.stack import get_testset_depth

logger = logging.getLogger(__name__)

Entry = Union[Pass, Fail, Error, "TestSetSummary"]


@dataclass(frozen=True)
class TestSetSummary:
    """What a finished aggregating test set collected.

    ``entries`` keeps evaluation order and holds both plain results and the
    summaries of nested test sets, so the summary is a tree whose leaves are
    results. All counts include every descendant.
    """

    __test__ = False

    description: str
    entries: tuple[Entry, ...] = ()
    duration_seconds: float | None = None
    _counts: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        counts = {"pass": 0, "fail": 0, "error": 0}
        for entry in self.entries:
            if isinstance(entry, TestSetSummary):
                counts["pass"] += entry.passes
                counts["fail"] += entry.fails
                counts["error"] += entry.errors
            else:
                counts[entry.kind.value] += 1
        object.__setattr__(self, "_counts", counts)

    @property
    def passes(self) -> int:
        return self._counts["pass"]

    @property
    def fails(self) -> int:
        return self._counts["fail"]

    @property
    def errors(self) -> int:
        return self._counts["error"]

    @property
    def failed(self) -> int:
        return self.fails + self.errors

    @property
    def total(self) -> int:
        return self.passes + self.fails + self.errors

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    @property
    def results(self) -> list[ResultKind]:
        """Results recorded directly into this test set."""
        return [e for e in self.entries if not isinstance(e, TestSetSummary)]

    @property
    def children(self) -> list[TestSetSummary]:
        return [e for e in self.entries if isinstance(e, TestSetSummary)]

    def failures(
        self, prefix: tuple[str, ...] = ()
    ) -> Iterator[tuple[tuple[str, ...], Fail | Error]]:
        """Yield ``(description path, result)`` for every Fail/Error in the subtree."""
        path = prefix + (self.description,)
        for entry in self.entries:
            if isinstance(entry, TestSetSummary):
                yield from entry.failures(path)
            elif not entry.passed:
                yield path, entry

    def child_duration_stats(self) -> DurationStatistics:
        return compute_stats([c.duration_seconds for c in self.children])

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "passes": self.passes,
            "fails": self.fails,
            "errors": self.errors,
            "total": self.total,
            "duration_seconds": self.duration_seconds,
            "entries": [e.to_dict() for e in self.entries],
        }


class AggregatingTestSet(AbstractTestSet):
    """Collects results and nested summaries, deferring failures to the outermost scope.

    Nested inside another test set, ``finish`` only returns the summary and
    the caller records it into the parent. When nothing is left on the
    context's stack, ``finish`` runs the configured reporters and raises a
    single ``TestingAborted`` if anything in the subtree failed.
    """

    def __init__(
        self,
        description: str = "",
        options: TestSetOptions | dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        self.description = description
        self.options = make_options(options, **kwargs)
        self.results: list[Entry] = []
        self._lock = threading.Lock()
        self._finished = False
        self._started = time.perf_counter()

    def record(self, result: Entry) -> Entry:
        if not isinstance(result, (Pass, Fail, Error, TestSetSummary)):
            raise TypeError(
                f"Cannot record {type(result).__name__} in a test set; "
                "expected Pass, Fail, Error or TestSetSummary"
            )
        with self._lock:
            if self._finished:
                raise TestSetFinishedError(
                    f"Test set {self.description!r} is already finished"
                )
            self.results.append(result)
        if self.options.verbose:
            logger.debug("[%s] %s", self.description, result)
        return result

    def finish(self) -> TestSetSummary:
        with self._lock:
            if self._finished:
                raise TestSetFinishedError(
                    f"Test set {self.description!r} is already finished"
                )
            self._finished = True
            entries = tuple(self.results)

        summary = TestSetSummary(
            description=self.description,
            entries=entries,
            duration_seconds=round(time.perf_counter() - self._started, 6),
        )
        logger.debug(
            "Finished test set %r: %d passed, %d failed, %d errored",
            self.description,
            summary.passes,
            summary.fails,
            summary.errors,
        )

        if get_testset_depth() > 0:
            return summary

        for reporter in build_reporters(self.options):
            try:
                reporter.report(summary)
            except Exception as e:
                # a broken reporter must not replace the aggregated outcome
                logger.error(
                    f"{type(reporter).__name__} failed for test set "
                    f"{self.description!r}: {type(e).__name__}: {e}",
                    exc_info=True,
                )

        if not summary.all_passed and self.options.rethrow:
            raise TestingAborted.from_summary(summary)
        return summary

    def __repr__(self) -> str:
        return (
            f"AggregatingTestSet({self.description!r}, "
            f"results={len(self.results)}, finished={self._finished})"
        )
