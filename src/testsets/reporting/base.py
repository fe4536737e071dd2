from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from testsets.aggregating import TestSetSummary


class BaseReporter(ABC):
    @abstractmethod
    def report(self, summary: TestSetSummary) -> Path | None:
        """Render the summary of a finished outermost test set."""
        ...
