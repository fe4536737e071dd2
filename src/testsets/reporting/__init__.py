"""Report renderers invoked when the outermost test set finishes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from testsets.reporting.base import BaseReporter
from testsets.reporting.console import ConsoleReporter
from testsets.reporting.html import HtmlReporter, generate_report
from testsets.reporting.junit import JUnitReporter, write_junit

if TYPE_CHECKING:
    from testsets.config import TestSetOptions


def build_reporters(options: TestSetOptions) -> list[BaseReporter]:
    """Select the reporters an outermost test set runs, in the order they run."""
    reporters: list[BaseReporter] = []
    if options.show_summary:
        reporters.append(ConsoleReporter())
    if options.junit_path is not None:
        reporters.append(JUnitReporter(options.junit_path))
    if options.html_path is not None:
        # without an explicit junit_path the XML is named after the HTML file
        junit_path = options.junit_path or options.html_path.with_name(
            f"{options.html_path.stem}.junit.xml"
        )
        reporters.append(
            HtmlReporter(
                options.html_path,
                junit_path=junit_path,
                owns_junit=options.junit_path is None,
            )
        )
    return reporters


__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "HtmlReporter",
    "JUnitReporter",
    "build_reporters",
    "generate_report",
    "write_junit",
]
