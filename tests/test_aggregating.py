"""Tests for the aggregating test set and its summaries."""

import pytest

from testsets.aggregating import AggregatingTestSet, TestSetSummary
from testsets.errors import InvalidOptionsError, TestingAborted, TestSetFinishedError
from testsets.results import Error, Fail, Pass
from testsets.stack import pop_testset, push_testset


def test_record_never_raises_on_failure():
    ts = AggregatingTestSet("agg", show_summary=False)
    ts.record(Fail("x"))
    ts.record(Error("y", "boom"))
    assert len(ts.results) == 2


def test_record_returns_result():
    ts = AggregatingTestSet("agg")
    result = Pass("x")
    assert ts.record(result) is result


def test_record_preserves_order():
    ts = AggregatingTestSet("agg")
    results = [Pass("1"), Fail("2"), Pass("3"), Error("4", "e")]
    for r in results:
        ts.record(r)
    assert ts.results == results


def test_record_rejects_non_results():
    ts = AggregatingTestSet("agg")
    with pytest.raises(TypeError):
        ts.record(True)


def test_finish_all_passing_returns_summary():
    ts = AggregatingTestSet("basic", show_summary=False)
    for i in range(3):
        ts.record(Pass(str(i)))
    summary = ts.finish()
    assert (summary.passes, summary.fails, summary.errors) == (3, 0, 0)
    assert summary.all_passed
    assert summary.description == "basic"


def test_outermost_finish_raises_once_with_counts():
    ts = AggregatingTestSet("top", show_summary=False)
    ts.record(Pass("a"))
    ts.record(Fail("1 == 2", "1 != 2"))
    ts.record(Error("f()", ValueError("bad")))

    with pytest.raises(TestingAborted) as exc_info:
        ts.finish()

    summary = exc_info.value.summary
    assert summary.fails == 1
    assert summary.errors == 1
    assert summary.failed == 2
    message = str(exc_info.value)
    assert "1 == 2" in message
    assert "1 != 2" in message
    assert "ValueError: bad" in message
    assert "top" in message


def test_nested_finish_does_not_raise():
    parent = AggregatingTestSet("parent")
    push_testset(parent)
    try:
        child = AggregatingTestSet("child")
        child.record(Fail("x"))
        summary = child.finish()
    finally:
        pop_testset()
    assert summary.fails == 1


def test_rethrow_off_returns_failing_summary():
    ts = AggregatingTestSet("quiet", rethrow=False, show_summary=False)
    ts.record(Fail("x"))
    summary = ts.finish()
    assert summary.fails == 1
    assert not summary.all_passed


def test_record_after_finish_is_rejected():
    ts = AggregatingTestSet("done", show_summary=False)
    ts.finish()
    with pytest.raises(TestSetFinishedError):
        ts.record(Pass("late"))
    with pytest.raises(TestSetFinishedError):
        ts.finish()


def test_unknown_option_rejected_at_construction():
    with pytest.raises(InvalidOptionsError, match="not_an_option"):
        AggregatingTestSet("x", not_an_option=True)


def test_options_mapping_accepted():
    ts = AggregatingTestSet("x", {"verbose": True})
    assert ts.options.verbose is True


# --- TestSetSummary ---


def _tree() -> TestSetSummary:
    inner = TestSetSummary("inner", (Pass("a"), Fail("b", "m")))
    middle = TestSetSummary("middle", (Error("c", "e"), inner), duration_seconds=0.5)
    other = TestSetSummary("other", (Pass("d"),), duration_seconds=1.5)
    return TestSetSummary("root", (Pass("e"), middle, other))


def test_summary_counts_are_recursive():
    root = _tree()
    assert root.passes == 3
    assert root.fails == 1
    assert root.errors == 1
    assert root.total == 5


def test_summary_keeps_children_as_entries():
    root = _tree()
    assert [c.description for c in root.children] == ["middle", "other"]
    assert root.results == [Pass("e")]


def test_summary_failures_carry_description_path():
    failures = list(_tree().failures())
    assert [(path, r.expr) for path, r in failures] == [
        (("root", "middle"), "c"),
        (("root", "middle", "inner"), "b"),
    ]


def test_summary_child_duration_stats():
    stats = _tree().child_duration_stats()
    assert stats.count == 2
    assert stats.avg == pytest.approx(1.0)
    assert stats.min == pytest.approx(0.5)
    assert stats.max == pytest.approx(1.5)


def test_summary_to_dict_nests_children():
    data = _tree().to_dict()
    assert data["fails"] == 1
    assert data["entries"][1]["description"] == "middle"
    assert data["entries"][1]["entries"][1]["entries"][1]["kind"] == "fail"
