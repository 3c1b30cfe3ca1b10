# controller.py
from __future__ import annotations
import logging
from enum import Enum
from typing import Any, Callable

from app_state import Observable
from clock import ButtonState, ClockState
from timer import CountdownTicker, Direction, DurationAdjuster, Durations, monotonic_ms

logger = logging.getLogger(__name__)


class TimerPhase(Enum):
    IDLE = "idle"
    ADJUSTING = "adjusting"
    RUNNING = "running"


class TimerController:
    """
    The single timer: owns the durations, the adjustment loop and the
    countdown loop, and publishes ClockState / ButtonState snapshots.

    - press_increase / press_decrease: start adjusting (ignored while running)
    - release: stop adjusting
    - start: begin the countdown (ignored while running)
    - stop: cancel everything and reset to 00:00:00

    `scheduler` is anything with Tk's after()/after_cancel(), usually the
    Tk root; `clock` returns milliseconds and drives the hold acceleration.
    """
    def __init__(self, scheduler: Any, clock: Callable[[], int] = monotonic_ms):
        self._durations = Durations()

        # snapshots for the presentation layer
        self.clock: Observable[ClockState] = Observable(ClockState())
        self.buttons: Observable[ButtonState] = Observable(ButtonState.idle())

        self._adjuster = DurationAdjuster(
            scheduler, self._durations, on_clock=self.clock.set, clock=clock)
        self._ticker = CountdownTicker(
            scheduler, self._durations,
            on_clock=self.clock.set, on_buttons=self.buttons.set)

    # ----- properties -----
    @property
    def phase(self) -> TimerPhase:
        if self._ticker.running:
            return TimerPhase.RUNNING
        if self._adjuster.active:
            return TimerPhase.ADJUSTING
        return TimerPhase.IDLE

    @property
    def total(self) -> int:
        return self._durations.total

    @property
    def elapsed(self) -> int:
        return self._durations.elapsed

    # ----- user actions -----
    def press_increase(self) -> None:
        self._press(Direction.INCREASE)

    def press_decrease(self) -> None:
        self._press(Direction.DECREASE)

    def release(self) -> None:
        self._adjuster.end()

    def start(self) -> None:
        if self._ticker.running:
            logger.debug("start ignored: already running")
            return
        self._adjuster.end()
        self._ticker.start()

    def stop(self) -> None:
        self._adjuster.end()
        self._ticker.stop()

    # ----- internal methods -----
    def _press(self, direction: Direction) -> None:
        if self._ticker.running:
            logger.debug("%s ignored: countdown running", direction.value)
            return
        self._adjuster.begin(direction)
