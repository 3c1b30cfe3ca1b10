# clock.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ClockState:
    """
    a displayable snapshot of the countdown
    hours/minutes/seconds are the zero-padded remaining time
    """
    hours: str = "00"
    minutes: str = "00"
    seconds: str = "00"
    elapsed: int = 0
    total: int = 0

    @property
    def remaining(self) -> int:
        return max(0, self.total - self.elapsed)


@dataclass(frozen=True)
class ButtonState:
    """enabled flags for the Start / Stop pair; exactly one is enabled"""
    start_enabled: bool = True
    stop_enabled: bool = False

    def __post_init__(self) -> None:
        if self.start_enabled == self.stop_enabled:
            raise ValueError("exactly one of start/stop must be enabled")

    @classmethod
    def idle(cls) -> "ButtonState":
        return cls(start_enabled=True, stop_enabled=False)

    @classmethod
    def running(cls) -> "ButtonState":
        return cls(start_enabled=False, stop_enabled=True)


def clock_state(total: int, elapsed: int = 0) -> ClockState:
    """build the snapshot for the given total/elapsed seconds"""
    time_left = max(0, int(total) - int(elapsed))
    # hours wrap at 60, same as minutes; only visible past 59:59:59
    hour = time_left // 3600 % 60
    minute = time_left // 60 % 60
    second = time_left - minute * 60 - hour * 3600
    return ClockState(
        hours=f"{hour:02d}",
        minutes=f"{minute:02d}",
        seconds=f"{second:02d}",
        elapsed=int(elapsed),
        total=int(total),
    )


def format_hms(state: ClockState) -> str:
    """format a snapshot as HH:MM:SS"""
    return f"{state.hours}:{state.minutes}:{state.seconds}"
