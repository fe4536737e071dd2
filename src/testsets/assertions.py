"""Record already-evaluated assertion outcomes into the active test set."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from testsets.errors import TestingAborted
from testsets.results import Error, Fail, Pass, ResultKind
from testsets.stack import get_testset

R = TypeVar("R", Pass, Fail, Error)


def record(result: R) -> R:
    """Record ``result`` into the calling context's active test set."""
    get_testset().record(result)
    return result


def check(condition: Any, expr: str = "", message: str | None = None) -> ResultKind:
    """Record a Pass if ``condition`` is truthy, otherwise a Fail."""
    if condition:
        return record(Pass(expr))
    return record(Fail(expr, message))


def check_call(
    func: Callable[..., Any], *args: Any, expr: str = "", **kwargs: Any
) -> ResultKind:
    """Call ``func`` and record its outcome.

    A truthy return value records a Pass, a falsy one a Fail, and an
    exception an Error carrying that exception as its cause.
    """
    try:
        value = func(*args, **kwargs)
    except TestingAborted:
        raise
    except Exception as e:
        return record(Error(expr, e))
    if value:
        return record(Pass(expr))
    return record(Fail(expr, f"Evaluated: {value!r}"))
