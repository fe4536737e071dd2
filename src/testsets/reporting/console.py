from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from testsets.base import UNNAMED, describe_path
from testsets.reporting.base import BaseReporter

if TYPE_CHECKING:
    from testsets.aggregating import TestSetSummary

_COLUMNS = ("Pass", "Fail", "Error", "Total")


def _rows(summary: TestSetSummary, depth: int = 0) -> list[tuple[str, tuple[int, ...]]]:
    label = "  " * depth + (summary.description or UNNAMED)
    rows = [(label, (summary.passes, summary.fails, summary.errors, summary.total))]
    for child in summary.children:
        rows.extend(_rows(child, depth + 1))
    return rows


def format_summary(summary: TestSetSummary) -> str:
    """Render the summary table, one row per test set, nested sets indented."""
    rows = _rows(summary)
    header = "Test Summary:"
    label_width = max(len(header), *(len(label) for label, _ in rows))
    widths = [
        max(len(name), *(len(str(counts[i])) for _, counts in rows))
        for i, name in enumerate(_COLUMNS)
    ]

    lines = [
        f"{header:<{label_width}} | "
        + "  ".join(f"{name:>{w}}" for name, w in zip(_COLUMNS, widths))
    ]
    for label, counts in rows:
        # zero pass/fail/error counts are left blank; total is always shown
        cells = [
            f"{(str(c) if c or i == len(counts) - 1 else ''):>{w}}"
            for i, (c, w) in enumerate(zip(counts, widths))
        ]
        lines.append(f"{label:<{label_width}} | " + "  ".join(cells).rstrip())

    failures = list(summary.failures())
    if failures:
        lines.append("")
        for path, result in failures:
            lines.append(f"{describe_path(path)}: {result}")
    return "\n".join(lines)


class ConsoleReporter(BaseReporter):
    def __init__(self, err: bool = False):
        self.err = err

    def report(self, summary: TestSetSummary) -> Path | None:
        typer.echo(format_summary(summary), err=self.err)
        return None
