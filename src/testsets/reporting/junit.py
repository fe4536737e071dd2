from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from junitparser import Error as JUnitError
from junitparser import Failure, JUnitXml, TestCase, TestSuite

from testsets.base import describe_path
from testsets.reporting.base import BaseReporter
from testsets.results import ResultStatus

if TYPE_CHECKING:
    from testsets.aggregating import TestSetSummary


def _build_suites(
    summary: TestSetSummary, prefix: tuple[str, ...] = ()
) -> list[TestSuite]:
    """One suite per test set that holds results directly, parents first."""
    path = prefix + (summary.description,)
    name = describe_path(path)
    suites: list[TestSuite] = []

    results = summary.results
    # the outermost set always gets a suite so an empty run still shows up
    if results or not prefix:
        suite = TestSuite(name)
        # nesting level, read back by the HTML report
        suite.add_property("depth", str(len(prefix)))

        if summary.children:
            stats = summary.child_duration_stats()
            suite.add_property("children", str(stats.count))
            for stat_name in ("avg", "stddev", "min", "max"):
                stat_val = getattr(stats, stat_name)
                if stat_val is not None:
                    suite.add_property(f"child_duration_{stat_name}", str(stat_val))

        for index, result in enumerate(results, start=1):
            case = TestCase(result.expr or f"assertion {index}")
            case.classname = name
            if result.kind is ResultStatus.FAIL:
                case.result = [Failure(result.message or "")]
            elif result.kind is ResultStatus.ERROR:
                case.result = [JUnitError(result.message or "")]
            suite.add_testcase(case)

        # Set time after add_testcase (add_testcase resets it via update_statistics)
        suite.time = float(summary.duration_seconds or 0.0)
        suites.append(suite)

    for child in summary.children:
        suites.extend(_build_suites(child, path))
    return suites


def write_junit(path: Path, summary: TestSetSummary) -> Path:
    """Write junit.xml for a finished test set tree, return path."""
    xml = JUnitXml()
    for suite in _build_suites(summary):
        # Use append (not +=) to preserve properties and time
        xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path


class JUnitReporter(BaseReporter):
    def __init__(self, path: Path):
        self.path = Path(path)

    def report(self, summary: TestSetSummary) -> Path:
        return write_junit(self.path, summary)
