"""Result kinds produced by evaluating a single assertion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ResultStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


@dataclass(frozen=True)
class Pass:
    """The assertion evaluated to true.

    Attributes:
        expr: Source text of the assertion, used for diagnostics only.
    """

    expr: str = ""

    kind = ResultStatus.PASS

    @property
    def passed(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "expr": self.expr}

    def __str__(self) -> str:
        return f"Test Passed: {self.expr}"


@dataclass(frozen=True)
class Fail:
    """The assertion evaluated to false.

    Attributes:
        expr: Source text of the assertion.
        message: Optional human-readable detail (e.g. the mismatched values).
    """

    expr: str = ""
    message: str | None = None

    kind = ResultStatus.FAIL

    @property
    def passed(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "expr": self.expr, "message": self.message}

    def __str__(self) -> str:
        text = f"Test Failed: {self.expr}"
        if self.message:
            text += f"\n  {self.message}"
        return text


def _describe_cause(cause: BaseException | str | None) -> str | None:
    if cause is None:
        return None
    if isinstance(cause, BaseException):
        detail = str(cause)
        name = type(cause).__name__
        return f"{name}: {detail}" if detail else name
    return str(cause)


@dataclass(frozen=True)
class Error:
    """Evaluating the assertion itself raised.

    Attributes:
        expr: Source text of the assertion.
        cause: The exception (or a description of it) that was raised.
        message: Rendered form of ``cause``; derived when not given.
    """

    expr: str = ""
    cause: BaseException | str | None = field(default=None, compare=False)
    message: str | None = None

    kind = ResultStatus.ERROR

    def __post_init__(self) -> None:
        if self.message is None:
            object.__setattr__(self, "message", _describe_cause(self.cause))

    @property
    def passed(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "expr": self.expr, "message": self.message}

    def __str__(self) -> str:
        text = f"Error During Test: {self.expr}"
        if self.message:
            text += f"\n  {self.message}"
        return text


ResultKind = Pass | Fail | Error
