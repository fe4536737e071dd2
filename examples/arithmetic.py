"""Example script for `testsets run examples/arithmetic.py`."""

from testsets import check, check_call, testloop, testset


def test_addition(a, b, expected):
    check(a + b == expected, f"{a} + {b} == {expected}")


with testset("arithmetic"):
    with testset("addition"):
        testloop(
            [(1, 1, 2), (2, 3, 5), (-1, 1, 0)],
            test_addition,
            "{} + {}",
        )

    with testset("division"):
        check(6 / 3 == 2, "6 / 3 == 2")
        check_call(lambda: 1 // 1 == 1, expr="1 // 1 == 1")
