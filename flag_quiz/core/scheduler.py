"""Timed-callback abstraction used by the quiz session."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class Scheduler(Protocol):
    """Runs a callback once after a delay on the thread that owns the session.

    Scheduled callbacks cannot be cancelled; callers must make a late firing
    harmless.
    """

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None: ...
