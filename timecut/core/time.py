# timecut/core/time.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class TimeGenerator(ABC, Generic[T]):
    """
    TimeGenerator (contract)

    Supplies the notion of "current time" to a Scheduler:
      - current()        read, no side effect
      - tick() / untick() return the time BEFORE stepping, then step
      - reset()          back to the reset value
      - set(value)       jump anywhere
      - change_delta(d)  step size for future ticks only

    Time may be anything ordered: a simulation frame, a float, a Fraction.
    The generator is owned and mutated only by whoever drives the schedule.
    """

    @abstractmethod
    def current(self) -> T:
        ...

    @abstractmethod
    def tick(self) -> T:
        ...

    @abstractmethod
    def untick(self) -> T:
        ...

    @abstractmethod
    def reset(self) -> None:
        ...

    @abstractmethod
    def set(self, value: T) -> None:
        ...

    @abstractmethod
    def change_delta(self, delta: T) -> None:
        ...


class SimpleLinearTimeGenerator(TimeGenerator[Any]):
    """
    Linear time: reset_value, reset_value + delta, reset_value + 2 * delta, ...

    The present time is kept as anchor + steps * delta instead of summing
    delta repeatedly, so that ten ticks of 0.1 land on 1.0 exactly.
    set() and change_delta() re-anchor on the present value.
    """

    def __init__(self, reset_value=0.0, delta=0.1):
        self.reset_value = reset_value
        self.delta = delta
        self._anchor = reset_value
        self._steps = 0

    @classmethod
    def from_config(cls, cfg) -> "SimpleLinearTimeGenerator":
        return cls(reset_value=cfg.reset_value, delta=cfg.delta)

    def current(self):
        if self._steps == 0:
            return self._anchor
        return self._anchor + self._steps * self.delta

    def tick(self):
        t = self.current()
        self._steps += 1
        return t

    def untick(self):
        t = self.current()
        self._steps -= 1
        return t

    def reset(self) -> None:
        self.set(self.reset_value)

    def set(self, value) -> None:
        self._anchor = value
        self._steps = 0

    def change_delta(self, delta) -> None:
        self._anchor = self.current()
        self._steps = 0
        self.delta = delta

    def __repr__(self) -> str:
        return (
            f"SimpleLinearTimeGenerator(current={self.current()!r}, "
            f"reset_value={self.reset_value!r}, delta={self.delta!r})"
        )


# name used by the first release; Python floats are double precision, so
# this steps doubles, not single precision values
SimpleF32TimeGenerator = SimpleLinearTimeGenerator
