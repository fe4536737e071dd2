"""Scoped regions that own one test set for their duration."""

from __future__ import annotations

import logging
from contextlib import ContextDecorator
from typing import Any, Callable, Iterable, TypeVar

from testsets.aggregating import AggregatingTestSet, TestSetSummary
from testsets.base import AbstractTestSet
from testsets.stack import get_testset, get_testset_depth, pop_testset, push_testset

logger = logging.getLogger(__name__)

T = TypeVar("T")


class testset(ContextDecorator):
    """Run a block (or a decorated function) inside a fresh test set.

    On entry a test set of ``testset_type`` is built from the description and
    options and pushed onto the calling context's stack; assertions in the
    body record into it. On normal exit it is popped and finished, and a
    summary returned by a nested ``finish`` is recorded into the parent. If
    the body raises, the test set is still popped before the exception
    propagates, and it is not finished.

    Example::

        with testset("arithmetic"):
            check(1 + 1 == 2, "1 + 1 == 2")
    """

    def __init__(
        self,
        description: str = "",
        *,
        testset_type: Callable[..., AbstractTestSet] = AggregatingTestSet,
        **options: Any,
    ):
        self.description = description
        self.testset_type = testset_type
        self.options = options
        self.ts: AbstractTestSet | None = None
        self.summary: TestSetSummary | None = None

    def _recreate_cm(self) -> testset:
        # each decorated call gets its own region
        return type(self)(
            self.description, testset_type=self.testset_type, **self.options
        )

    def __enter__(self) -> AbstractTestSet:
        self.ts = self.testset_type(self.description, **self.options)
        self.summary = None
        push_testset(self.ts)
        return self.ts

    def __exit__(self, exc_type, exc, tb) -> bool:
        ts = pop_testset()
        if exc_type is not None:
            logger.debug(
                "Test set %r aborted by %s", ts.description, exc_type.__name__
            )
            return False

        summary = ts.finish()
        self.summary = summary
        if summary is not None and get_testset_depth() > 0:
            get_testset().record(summary)
        return False


def _describe(description: str | Callable[[Any], str] | None, index: int, item: Any) -> str:
    if description is None:
        return f"iteration {index}: {item!r}"
    if callable(description):
        return description(item)
    if isinstance(item, tuple):
        return description.format(*item)
    return description.format(item)


def testloop(
    items: Iterable[T],
    body: Callable[..., Any],
    description: str | Callable[[Any], str] | None = None,
    *,
    testset_type: Callable[..., AbstractTestSet] = AggregatingTestSet,
    **options: Any,
) -> list[TestSetSummary | None]:
    """Run ``body`` once per item, each call inside its own independent test set.

    Tuple items are unpacked into ``body``'s arguments. ``description`` is a
    ``str.format`` template filled from the item (unpacked the same way), a
    callable taking the item, or ``None`` for ``"iteration N: item"``.
    Returns the summary of every iteration, in order.
    """
    summaries: list[TestSetSummary | None] = []
    for index, item in enumerate(items, start=1):
        region = testset(
            _describe(description, index, item), testset_type=testset_type, **options
        )
        with region:
            if isinstance(item, tuple):
                body(*item)
            else:
                body(item)
        summaries.append(region.summary)
    return summaries


# keep pytest from collecting these when imported into test modules
testset.__test__ = False  # type: ignore[attr-defined]
testloop.__test__ = False  # type: ignore[attr-defined]
