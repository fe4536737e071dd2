from __future__ import annotations

import json
import runpy
from pathlib import Path

import typer

app = typer.Typer(name="testsets", help="Run scripts inside nested, aggregating test sets")


@app.command()
def run(
    script: str = typer.Argument(help="Path to a Python script that records assertions"),
    options: str | None = typer.Option(
        None, "--options", help="YAML file with test set options"
    ),
    junit: str | None = typer.Option(None, "--junit", help="Write JUnit XML here"),
    html: str | None = typer.Option(None, "--html", help="Write an HTML report here"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    log_file: str | None = typer.Option(
        None, "--log-file", help="Append debug output to this file"
    ),
    no_summary: bool = typer.Option(
        False, "--no-summary", help="Do not print the summary table"
    ),
):
    """Run SCRIPT inside an outermost aggregating test set."""
    from testsets.config import TestSetOptions, load_options, make_options
    from testsets.errors import InvalidOptionsError, TestingAborted
    from testsets.region import testset
    from testsets.verbose import setup_logger

    script_path = Path(script)
    if not script_path.exists():
        typer.echo(f"Error: script not found: {script}", err=True)
        raise typer.Exit(1)

    try:
        if options is not None:
            options_path = Path(options)
            if not options_path.exists():
                typer.echo(f"Error: options file not found: {options}", err=True)
                raise typer.Exit(1)
            base = load_options(options_path)
        else:
            base = TestSetOptions()

        overrides: dict[str, object] = {}
        if junit is not None:
            overrides["junit_path"] = Path(junit)
        if html is not None:
            overrides["html_path"] = Path(html)
        if no_summary:
            overrides["show_summary"] = False
        if verbose:
            overrides["verbose"] = True
        testset_options = make_options(base, **overrides)
    except InvalidOptionsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        Path(log_file) if log_file else None, verbose=verbose, logger_name="testsets"
    )
    logger.debug(f"Running {script_path}")

    try:
        with testset(script_path.stem, options=testset_options):
            runpy.run_path(str(script_path), run_name="__main__")
    except TestingAborted as e:
        failed = len(e.failures)
        typer.echo(f"Testing aborted: {failed} failing assertion(s)", err=True)
        raise typer.Exit(1)
    except Exception as e:
        logger.error(f"Script {script_path} raised {type(e).__name__}: {e}")
        typer.echo(f"Error: {script} raised {type(e).__name__}: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def report(
    junit_xml: str = typer.Argument(help="Path to a junit.xml written by a run"),
    out: str | None = typer.Option(
        None, help="Output path for the HTML report (defaults to report.html next to the XML)"
    ),
):
    """Regenerate the HTML report from a JUnit XML file."""
    from testsets.reporting.html import generate_report

    junit_path = Path(junit_xml)
    if not junit_path.is_file():
        typer.echo(f"Error: JUnit XML not found: {junit_xml}", err=True)
        raise typer.Exit(1)

    report_path = generate_report(junit_path, Path(out) if out else None)
    typer.echo(f"Report generated: {report_path}")


@app.command()
def schema(
    out: str | None = typer.Option(
        None, help="Write the JSON Schema here instead of printing it"
    ),
):
    """Print the JSON Schema of the options file."""
    from testsets.config import options_json_schema

    text = json.dumps(options_json_schema(), indent=2) + "\n"
    if out is None:
        typer.echo(text, nl=False)
        return
    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text)
    typer.echo(f"Wrote {out_path}")


if __name__ == "__main__":
    app()
