from __future__ import annotations

import pytest

from controller import TimerController


class FakeScheduler:
    """Simulated Tk after()/after_cancel() queue driven by advance(ms)."""

    def __init__(self) -> None:
        self.now = 0
        self._jobs = {}
        self._seq = 0

    def now_ms(self) -> int:
        return self.now

    def after(self, ms, func):
        self._seq += 1
        job_id = f"after#{self._seq}"
        self._jobs[job_id] = (self.now + ms, self._seq, func)
        return job_id

    def after_cancel(self, job_id) -> None:
        self._jobs.pop(job_id, None)

    @property
    def pending(self) -> int:
        return len(self._jobs)

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = [(when, seq, job_id) for job_id, (when, seq, _) in self._jobs.items() if when <= target]
            if not due:
                break
            when, _, job_id = min(due)
            _, _, func = self._jobs.pop(job_id)
            self.now = when
            func()
        self.now = target


@pytest.fixture
def sched() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def controller(sched) -> TimerController:
    return TimerController(sched, clock=sched.now_ms)


def set_total(controller: TimerController, seconds: int) -> None:
    """Tap "+" `seconds` times; every press applies one +1 step immediately."""
    for _ in range(seconds):
        controller.press_increase()
        controller.release()
