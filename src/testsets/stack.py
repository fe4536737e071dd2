"""Per-execution-context stack of active test sets.

Each thread, and each asyncio task, owns its own stack. Stacks are kept in a
``ContextVar`` and tagged with the context that created them: a context that
finds a stack created by someone else (an asyncio task copies its parent's
context when it is spawned) starts over with an empty one. Handing the
parent's active test sets to spawned work is opt-in, see ``inherit_testsets``.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
import threading
from contextvars import ContextVar
from typing import Any, Callable, Iterator, TypeVar

from testsets.base import AbstractTestSet
from testsets.default import default_testset

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _context_owner() -> object:
    """Identity of the running execution context: the asyncio task, else the thread."""
    try:
        task = asyncio.current_task()
    except RuntimeError:
        task = None
    if task is not None:
        return task
    return threading.current_thread()


class ContextTestSetStack:
    """Ordered test sets active in one execution context, innermost last.

    Only the owning context mutates a stack, so no locking is done here.
    An empty stack falls back to ``default_testset``, which is never counted.
    """

    def __init__(self, owner: object, testsets: list[AbstractTestSet] | None = None):
        self.owner = owner
        self._testsets: list[AbstractTestSet] = list(testsets or [])

    def push(self, ts: AbstractTestSet) -> None:
        self._testsets.append(ts)

    def pop(self) -> AbstractTestSet:
        if not self._testsets:
            return default_testset
        return self._testsets.pop()

    def peek(self) -> AbstractTestSet:
        if not self._testsets:
            return default_testset
        return self._testsets[-1]

    current = peek

    def depth(self) -> int:
        return len(self._testsets)

    def testsets(self) -> tuple[AbstractTestSet, ...]:
        """Snapshot of the active test sets, outermost first."""
        return tuple(self._testsets)

    def __len__(self) -> int:
        return len(self._testsets)

    def __iter__(self) -> Iterator[AbstractTestSet]:
        return iter(self.testsets())

    def __repr__(self) -> str:
        return f"ContextTestSetStack(depth={self.depth()})"


_stack_var: ContextVar[ContextTestSetStack | None] = ContextVar(
    "testsets_stack", default=None
)


def current_stack() -> ContextTestSetStack:
    """Return the calling context's stack, creating it on first use."""
    owner = _context_owner()
    stack = _stack_var.get()
    if stack is None or stack.owner is not owner:
        stack = ContextTestSetStack(owner)
        _stack_var.set(stack)
    return stack


def get_testset() -> AbstractTestSet:
    """Active test set for this context, or the default test set if none."""
    return current_stack().peek()


def push_testset(ts: AbstractTestSet) -> None:
    stack = current_stack()
    stack.push(ts)
    logger.debug("Pushed test set %r (depth %d)", ts.description, stack.depth())


def pop_testset() -> AbstractTestSet:
    """Remove and return the active test set; the default test set when empty."""
    stack = current_stack()
    ts = stack.pop()
    logger.debug("Popped test set %r (depth %d)", ts.description, stack.depth())
    return ts


def get_testset_depth() -> int:
    """Number of active test sets, not counting the default test set."""
    return current_stack().depth()


def inherit_testsets(func: F) -> F:
    """Wrap ``func`` so it runs with a copy of the caller's active test sets.

    Call this in the parent context, then hand the wrapper to a thread, an
    executor or ``asyncio.create_task``. Inside the child, assertions record
    into the parent's innermost test set; pushes and pops made by the child
    only affect the child's own copy of the stack.
    """
    snapshot = current_stack().testsets()

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            previous = _stack_var.set(
                ContextTestSetStack(_context_owner(), list(snapshot))
            )
            try:
                return await func(*args, **kwargs)
            finally:
                _stack_var.reset(previous)

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        previous = _stack_var.set(ContextTestSetStack(_context_owner(), list(snapshot)))
        try:
            return func(*args, **kwargs)
        finally:
            _stack_var.reset(previous)

    return wrapper  # type: ignore[return-value]
