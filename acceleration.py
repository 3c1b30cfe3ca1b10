# acceleration.py
from __future__ import annotations
from bisect import bisect_right
from typing import NamedTuple

# Wait and increment are two separate step functions over the same hold
# clock; their breakpoints are deliberately not aligned.
WAIT_BREAKS_MS = (2000, 4000, 6000)
WAIT_MS = (300, 150, 100, 50)

INCREMENT_BREAKS_MS = (2000, 3000, 6000, 8000)
INCREMENTS = (1, 2, 5, 15, 60)


class AccelerationStep(NamedTuple):
    wait_ms: int
    increment: int


def curve(held_ms: float) -> AccelerationStep:
    """
    map how long a button has been held (ms) to
    (pause before the next step in ms, seconds to add/remove this step)
    """
    held_ms = max(0, held_ms)
    wait = WAIT_MS[bisect_right(WAIT_BREAKS_MS, held_ms)]
    inc = INCREMENTS[bisect_right(INCREMENT_BREAKS_MS, held_ms)]
    return AccelerationStep(wait, inc)
