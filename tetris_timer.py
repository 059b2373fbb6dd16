
"""Cancelable one-shot delayed action, polled by the frame tick"""
from typing import Optional


class LockTimer:
    """
    Single-slot timer with a monotonic deadline (ms).

    • arm() replaces any pending deadline, so at most one is ever live.
    • poll() reports True exactly once per arm, when the deadline has passed.
    • suspend()/resume() carry the remaining time across a pause.
    """
    def __init__(self, duration_ms: int):
        self.duration_ms = duration_ms
        self.deadline: Optional[float] = None
        self.remaining: Optional[float] = None

    @property
    def armed(self) -> bool:
        return self.deadline is not None

    def arm(self, now: float):
        self.deadline = now + self.duration_ms
        self.remaining = None

    def cancel(self):
        self.deadline = None
        self.remaining = None

    def poll(self, now: float) -> bool:
        if self.deadline is None or now < self.deadline:
            return False
        self.deadline = None
        return True

    def suspend(self, now: float):
        if self.deadline is None:
            return
        self.remaining = max(0.0, self.deadline - now)
        self.deadline = None

    def resume(self, now: float):
        if self.remaining is None:
            return
        self.deadline = now + self.remaining
        self.remaining = None
