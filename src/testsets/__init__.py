"""Composable test sets: context-local stacks of scopes that collect assertion results."""

from testsets.aggregating import AggregatingTestSet, TestSetSummary
from testsets.assertions import check, check_call, record
from testsets.base import AbstractTestSet
from testsets.config import TestSetOptions, load_options
from testsets.default import DefaultTestSet, default_testset
from testsets.errors import (
    InvalidOptionsError,
    TestingAborted,
    TestSetError,
    TestSetFinishedError,
)
from testsets.region import testloop, testset
from testsets.results import Error, Fail, Pass, ResultKind, ResultStatus
from testsets.stack import (
    ContextTestSetStack,
    current_stack,
    get_testset,
    get_testset_depth,
    inherit_testsets,
    pop_testset,
    push_testset,
)

__all__ = [
    "AbstractTestSet",
    "AggregatingTestSet",
    "ContextTestSetStack",
    "DefaultTestSet",
    "Error",
    "Fail",
    "InvalidOptionsError",
    "Pass",
    "ResultKind",
    "ResultStatus",
    "TestSetError",
    "TestSetFinishedError",
    "TestSetOptions",
    "TestSetSummary",
    "TestingAborted",
    "check",
    "check_call",
    "current_stack",
    "default_testset",
    "get_testset",
    "get_testset_depth",
    "inherit_testsets",
    "load_options",
    "pop_testset",
    "push_testset",
    "record",
    "testloop",
    "testset",
]
