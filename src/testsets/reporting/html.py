from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader
from junitparser import JUnitXml

from testsets.reporting.base import BaseReporter
from testsets.reporting.junit import write_junit

if TYPE_CHECKING:
    from testsets.aggregating import TestSetSummary


def _load_suites(junit_path: Path) -> list[dict[str, Any]]:
    xml = JUnitXml.fromfile(str(junit_path))

    suites = []
    for suite in xml:
        cases = []
        for case in suite:
            result = None
            if case.result:
                result = {
                    "status": type(case.result[0]).__name__,
                    "message": case.result[0].message or "",
                }
            cases.append(
                {"name": case.name, "classname": case.classname, "result": result}
            )

        name = suite.name or ""
        props = {p.name: p.value for p in suite.properties()}
        depth = int(props.pop("depth", 0))
        suites.append(
            {
                "name": name,
                "depth": depth,
                "tests": suite.tests,
                "failures": suite.failures,
                "errors": suite.errors,
                "time": suite.time,
                "properties": props,
                "cases": cases,
            }
        )
    return suites


def generate_report(junit_path: Path, report_path: Path | None = None) -> Path:
    """Render junit.xml → report.html using Jinja2 template, return path."""
    if report_path is None:
        report_path = junit_path.with_name("report.html")

    suites = _load_suites(junit_path)
    total_tests = sum(s["tests"] for s in suites)
    total_failures = sum(s["failures"] for s in suites)
    total_errors = sum(s["errors"] for s in suites)

    tmpl_dir = Path(__file__).parent / "templates"
    env = Environment(loader=FileSystemLoader(str(tmpl_dir)), autoescape=True)
    template = env.get_template("report.html.j2")

    html = template.render(
        suites=suites,
        total_tests=total_tests,
        total_failures=total_failures,
        total_errors=total_errors,
        total_passed=total_tests - total_failures - total_errors,
        junit_path=str(junit_path),
    )
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(html, encoding="utf-8")
    return report_path


class HtmlReporter(BaseReporter):
    """Renders an HTML page from the JUnit XML of the run.

    When no JUnit reporter runs alongside, the XML is written first, to
    ``junit_path``.
    """

    def __init__(self, path: Path, junit_path: Path, owns_junit: bool = True):
        self.path = Path(path)
        self.junit_path = Path(junit_path)
        self.owns_junit = owns_junit

    def report(self, summary: TestSetSummary) -> Path:
        if self.owns_junit or not self.junit_path.exists():
            write_junit(self.junit_path, summary)
        return generate_report(self.junit_path, self.path)
