"""Tests for the Pass / Fail / Error result kinds."""

import dataclasses

import pytest

from testsets.results import Error, Fail, Pass, ResultStatus


def test_pass_is_passed():
    result = Pass("1 == 1")
    assert result.passed is True
    assert result.kind is ResultStatus.PASS
    assert str(result) == "Test Passed: 1 == 1"


def test_fail_keeps_message():
    result = Fail("1 == 2", "1 != 2")
    assert result.passed is False
    assert result.kind is ResultStatus.FAIL
    assert "Test Failed: 1 == 2" in str(result)
    assert "1 != 2" in str(result)


def test_fail_without_message():
    assert str(Fail("x")) == "Test Failed: x"


def test_error_derives_message_from_exception():
    cause = ZeroDivisionError("division by zero")
    result = Error("1 / 0", cause)
    assert result.passed is False
    assert result.kind is ResultStatus.ERROR
    assert result.cause is cause
    assert result.message == "ZeroDivisionError: division by zero"
    assert "Error During Test: 1 / 0" in str(result)


def test_error_with_string_cause():
    assert Error("f()", "boom").message == "boom"


def test_error_with_bare_exception_uses_type_name():
    assert Error("f()", KeyError()).message == "KeyError"


def test_results_are_immutable():
    result = Fail("x", "y")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.message = "changed"


def test_to_dict():
    assert Pass("a").to_dict() == {"kind": "pass", "expr": "a"}
    assert Fail("b", "m").to_dict() == {"kind": "fail", "expr": "b", "message": "m"}
    assert Error("c", ValueError("v")).to_dict() == {
        "kind": "error",
        "expr": "c",
        "message": "ValueError: v",
    }
