"""Exceptions raised by test sets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from testsets.base import describe_path

if TYPE_CHECKING:
    from testsets.aggregating import TestSetSummary
    from testsets.results import ResultKind


class TestSetError(Exception):
    """Base class for all errors raised by the testsets package."""

    __test__ = False  # keep pytest from collecting this as a test class


class TestingAborted(TestSetError):
    """The run was stopped because at least one assertion failed or errored.

    Raised either immediately by the default test set on the first failing
    result, or once by the outermost aggregating test set when it finishes.
    """

    def __init__(
        self,
        message: str,
        *,
        summary: TestSetSummary | None = None,
        result: ResultKind | None = None,
    ):
        super().__init__(message)
        self.summary = summary
        self.result = result

    @classmethod
    def from_summary(cls, summary: TestSetSummary) -> TestingAborted:
        lines = [
            f"Some tests did not pass: {summary.passes} passed, "
            f"{summary.fails} failed, {summary.errors} errored."
        ]
        for path, result in summary.failures():
            lines.append(f"{describe_path(path)}: {result}")
        return cls("\n".join(lines), summary=summary)

    @property
    def failures(self) -> list[tuple[tuple[str, ...], ResultKind]]:
        if self.summary is not None:
            return list(self.summary.failures())
        if self.result is not None:
            return [((), self.result)]
        return []


class TestSetFinishedError(TestSetError):
    """A test set was used after ``finish`` had already been called."""


class InvalidOptionsError(TestSetError, ValueError):
    """Test set options were unrecognized or failed validation."""
