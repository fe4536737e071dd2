from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from testsets.aggregating import TestSetSummary
    from testsets.results import ResultKind


UNNAMED = "(unnamed)"


def describe_path(path: tuple[str, ...]) -> str:
    """Join nested test set descriptions, keeping a placeholder for unnamed sets."""
    return " / ".join(p or UNNAMED for p in path) or UNNAMED


class AbstractTestSet(ABC):
    """A reporting scope that receives the outcome of every assertion beneath it.

    Subclasses participate in the stack protocol by implementing ``record``
    and ``finish``. ``finish`` is called exactly once, after the test set has
    been popped off its context's stack; nothing is recorded afterwards.
    """

    __test__ = False

    description: str = ""

    @abstractmethod
    def record(self, result: ResultKind | TestSetSummary) -> Any:
        """Consume one outcome. Must never silently drop a Fail or Error."""
        ...

    @abstractmethod
    def finish(self) -> TestSetSummary | None:
        """Summarize what was recorded and trigger reporting/propagation."""
        ...
