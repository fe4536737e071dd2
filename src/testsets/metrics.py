from __future__ import annotations

from dataclasses import dataclass, asdict

import numpy as np


@dataclass
class DurationStatistics:
    """Statistics over the durations of a test set's direct children."""

    count: int
    avg: float | None
    min: float | None
    max: float | None
    stddev: float | None

    def to_dict(self) -> dict[str, float | int | None]:
        return asdict(self)


def compute_stats(values: list[float | None]) -> DurationStatistics:
    """Compute avg, min, max, stddev for a list of durations in seconds."""
    nums = [v for v in values if v is not None]
    if not nums:
        return DurationStatistics(count=0, avg=None, min=None, max=None, stddev=None)

    arr = np.array(nums)
    return DurationStatistics(
        count=len(nums),
        avg=round(float(np.mean(arr)), 4),
        min=round(float(np.min(arr)), 4),
        max=round(float(np.max(arr)), 4),
        stddev=round(float(np.std(arr)), 4),
    )
