"""
Countdown timer used to pace spawning and position updates.
"""

from enum import Enum


class TimerMode(Enum):
    """How a timer behaves once its duration has elapsed."""
    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """
    Elapsed-time counter that reports when a duration has passed.

    A ONCE timer stays finished until ``reset()`` is called; ticking it again
    has no effect. A REPEATING timer wraps around and is only finished on the
    tick during which it wrapped.
    """

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE):
        self.duration = duration
        self.mode = mode
        self.elapsed = 0.0
        self.finished = False
        self.times_finished = 0  # completions during the last tick

    def tick(self, delta: float) -> 'Timer':
        """Advance the timer by ``delta`` seconds."""
        if self.mode is TimerMode.ONCE:
            if self.finished:
                self.times_finished = 0
                return self
            self.elapsed += delta
            if self.elapsed >= self.duration:
                self.elapsed = self.duration
                self.finished = True
                self.times_finished = 1
            return self

        self.elapsed += delta
        if self.elapsed >= self.duration:
            if self.duration > 0:
                self.times_finished = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            else:
                self.times_finished = 1
                self.elapsed = 0.0
            self.finished = True
        else:
            self.times_finished = 0
            self.finished = False
        return self

    def reset(self):
        """Zero the elapsed time and clear the finished flag."""
        self.elapsed = 0.0
        self.finished = False
        self.times_finished = 0

    @property
    def remaining(self) -> float:
        return max(0.0, self.duration - self.elapsed)

    @property
    def fraction(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, self.elapsed / self.duration)

    def __repr__(self):
        return (f"Timer({self.elapsed:.2f}/{self.duration:.2f}s, {self.mode.value}, "
                f"finished={self.finished})")
