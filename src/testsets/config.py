from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from testsets.errors import InvalidOptionsError


class TestSetOptions(BaseModel):
    """Options recognized by ``AggregatingTestSet``.

    Unknown keys are rejected so a typo cannot quietly change how results
    are reported.

    Attributes:
        rethrow: Raise ``TestingAborted`` from the outermost test set when
            anything failed. When off, the summary is only returned.
        verbose: Log every recorded result at DEBUG level.
        show_summary: Print the summary table when the outermost test set
            finishes.
        junit_path: Write a JUnit XML report here when the outermost test set
            finishes.
        html_path: Render an HTML report here when the outermost test set
            finishes.
    """

    __test__ = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    rethrow: bool = True
    verbose: bool = False
    show_summary: bool = True
    junit_path: Path | None = None
    html_path: Path | None = None

    @field_validator("junit_path", "html_path", mode="before")
    @classmethod
    def expand_env(cls, v: Any) -> Any:
        if isinstance(v, str):
            return expandvars(v, nounset=True)
        return v


def make_options(
    options: TestSetOptions | dict[str, Any] | None = None, **overrides: Any
) -> TestSetOptions:
    """Build validated options from a model, a mapping and/or keyword overrides."""
    if isinstance(options, TestSetOptions):
        if not overrides:
            return options
        base = options.model_dump()
    else:
        base = dict(options or {})
    base.update(overrides)
    try:
        return TestSetOptions(**base)
    except ValidationError as e:
        raise InvalidOptionsError(f"Invalid test set options:\n{e}") from e
    except Exception as e:
        # expandvars raises for ${VAR} references that are unset
        raise InvalidOptionsError(f"Invalid test set options: {e}") from e


def load_options(path: Path) -> TestSetOptions:
    """Load and validate test set options from a YAML file."""
    options_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise InvalidOptionsError(
            f"Options file {path} must contain a mapping, got {type(raw).__name__}"
        )

    options = make_options(raw)

    # Resolve relative report paths against the options file location
    updates: dict[str, Path] = {}
    for key in ("junit_path", "html_path"):
        value: Path | None = getattr(options, key)
        if value is not None and not value.is_absolute():
            updates[key] = (options_dir / value).resolve()
    if updates:
        options = options.model_copy(update=updates)

    return options


def options_json_schema() -> dict[str, Any]:
    return TestSetOptions.model_json_schema()
