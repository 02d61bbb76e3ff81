# timecut/core/interrupt.py
from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable


class Interrupt(Enum):
    """
    Answer of an interrupt predicate, polled once per schedule() step.
    """

    CONTINUE = "continue"
    BREAK = "break"


InterruptFn = Callable[[Any], Interrupt]


class FlagInterrupt:
    """
    Interrupt predicate backed by a threading.Event.

    Another thread calls request(); the scheduler polls on its next step.
    Polling never blocks.

        flag = FlagInterrupt()
        scheduler.interruptible_with(flag)
        # elsewhere: flag.request()
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self.observed_at = None

    def request(self) -> None:
        self._event.set()

    def clear(self) -> None:
        self._event.clear()
        self.observed_at = None

    @property
    def requested(self) -> bool:
        return self._event.is_set()

    def __call__(self, t) -> Interrupt:
        if self._event.is_set():
            self.observed_at = t
            return Interrupt.BREAK
        return Interrupt.CONTINUE
