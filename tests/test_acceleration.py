from __future__ import annotations

import pytest

from acceleration import curve


@pytest.mark.parametrize(
    "held, wait, inc",
    [
        (0, 300, 1),
        (1999, 300, 1),
        (2000, 150, 2),
        (2999, 150, 2),
        (3000, 150, 5),
        (3999, 150, 5),
        (4000, 100, 5),
        (5999, 100, 5),
        (6000, 50, 15),
        (7999, 50, 15),
        (8000, 50, 60),
        (60_000, 50, 60),
    ],
)
def test_curve_breakpoints(held, wait, inc) -> None:
    assert curve(held) == (wait, inc)


def test_curve_named_fields() -> None:
    step = curve(2500)
    assert step.wait_ms == 150
    assert step.increment == 2


def test_negative_hold_is_slowest_tier() -> None:
    assert curve(-50) == (300, 1)
