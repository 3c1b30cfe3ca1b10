# timer.py
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from acceleration import curve
from clock import ButtonState, ClockState, clock_state

logger = logging.getLogger(__name__)


def monotonic_ms() -> int:
    """milliseconds from a monotonic clock"""
    return int(time.monotonic() * 1000)


class Direction(Enum):
    INCREASE = "increase"
    DECREASE = "decrease"


@dataclass
class Durations:
    """total/elapsed seconds of the single timer, shared by both loops"""
    total: int = 0
    elapsed: int = 0

    def reset(self) -> None:
        self.total = 0
        self.elapsed = 0


@dataclass
class AdjustmentSession:
    press_start_ms: int
    direction: Direction


class _AfterLoop:
    """
    base for a loop driven by a Tk-style scheduler:
    scheduler.after(ms, func) -> job id, scheduler.after_cancel(job id)
    """
    def __init__(self, scheduler: Any):
        self._scheduler = scheduler
        self._after_id = None  # pending job id, None when idle

    def _schedule(self, delay_ms: int, func: Callable[[], None]) -> None:
        self._after_id = self._scheduler.after(int(delay_ms), func)

    def _cancel_after(self) -> None:
        """cancel any pending after job"""
        if self._after_id is not None:
            self._scheduler.after_cancel(self._after_id)
            self._after_id = None


class DurationAdjuster(_AfterLoop):
    """
    grows or shrinks the total duration while a button is held
    the step size and pace follow acceleration.curve
    """
    def __init__(self,
                 scheduler: Any,
                 durations: Durations,
                 on_clock: Callable[[ClockState], None],
                 clock: Callable[[], int] = monotonic_ms):
        super().__init__(scheduler)
        self._durations = durations
        self._on_clock = on_clock  # called after every change
        self._clock = clock
        self._session: Optional[AdjustmentSession] = None

    # ----- properties -----
    @property
    def active(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[AdjustmentSession]:
        return self._session

    # ----- outer controls -----
    def begin(self, direction: Direction) -> None:
        """
        start adjusting in the given direction
        replaces any running loop and always restarts the ramp
        """
        self._cancel_after()
        self._session = AdjustmentSession(self._clock(), direction)
        self._step()

    def end(self) -> None:
        """stop adjusting; nothing happens if no loop runs"""
        self._cancel_after()
        self._session = None

    # ----- internal methods -----
    def _step(self) -> None:
        self._after_id = None
        session = self._session
        if session is None:
            return
        held = self._clock() - session.press_start_ms
        wait_ms, increment = curve(held)

        d = self._durations
        if session.direction is Direction.INCREASE:
            d.total += increment
        else:
            d.total = max(0, d.total - increment)

        logger.debug("adjust %s held=%dms wait=%dms inc=%d total=%d",
                     session.direction.value, held, wait_ms, increment, d.total)
        self._on_clock(clock_state(d.total, d.elapsed))

        if session.direction is Direction.DECREASE and d.total == 0:
            # hit the floor, behave as if released
            self._session = None
            return
        self._schedule(wait_ms, self._step)


class CountdownTicker(_AfterLoop):
    """
    advances elapsed toward total once per PERIOD_MS
    resets everything when elapsed reaches total or on stop()
    """
    PERIOD_MS = 1000

    def __init__(self,
                 scheduler: Any,
                 durations: Durations,
                 on_clock: Callable[[ClockState], None],
                 on_buttons: Callable[[ButtonState], None]):
        super().__init__(scheduler)
        self._durations = durations
        self._on_clock = on_clock
        self._on_buttons = on_buttons
        self._running = False

    # ----- properties -----
    @property
    def running(self) -> bool:
        """return whether the countdown is running"""
        return self._running

    # ----- outer controls -----
    def start(self) -> None:
        """start counting from zero elapsed"""
        self._cancel_after()
        self._running = True
        d = self._durations
        d.elapsed = 0
        logger.info("countdown started: %ds", d.total)
        self._on_buttons(ButtonState.running())
        self._on_clock(clock_state(d.total, d.elapsed))
        self._schedule(self.PERIOD_MS, self._fire)

    def stop(self) -> None:
        """cancel the countdown and reset both durations"""
        self._cancel_after()
        if self._running:
            logger.info("countdown stopped at %d/%ds",
                        self._durations.elapsed, self._durations.total)
        self._running = False
        self._durations.reset()
        self._on_clock(ClockState())
        self._on_buttons(ButtonState.idle())

    # ----- internal methods -----
    def _fire(self) -> None:
        self._after_id = None
        if not self._running:
            return
        d = self._durations
        if d.elapsed < d.total:
            d.elapsed += 1
            self._on_clock(clock_state(d.total, d.elapsed))
        if d.elapsed >= d.total:
            self.stop()
            return
        self._schedule(self.PERIOD_MS, self._fire)
