# timecut/core/cut.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from timecut.core.behavior import Reactive, as_reactive
from timecut.core.blend import Blend
from timecut.utils.errors import InvalidIntervalError


@dataclass(frozen=True, eq=False)
class Cut:
    """
    Cut (FINAL / FROZEN)

    A behavior bound to the half-open interval [start_t, stop_t).

    Invariants:
      - start_t <= stop_t, checked at construction (unordered bounds such as
        NaN are rejected too)
      - immutable once built; the behavior may be shared with other cuts

    blend (optional):
      how the cut considered right after this one, at the same instant on
      the next track, is merged into the running result. See react_blend().
    """

    start_t: Any
    stop_t: Any
    behavior: Reactive
    blend: Optional[Blend] = None

    def __post_init__(self):
        if not self.start_t <= self.stop_t:
            raise InvalidIntervalError(self.start_t, self.stop_t)

        # plain callables are accepted and wrapped
        object.__setattr__(self, "behavior", as_reactive(self.behavior))

    @classmethod
    def new(cls, start_t, stop_t, behavior, blend: Optional[Blend] = None) -> "Cut":
        return cls(start_t, stop_t, behavior, blend)

    # --------------------------------------------------
    def dur(self):
        return self.stop_t - self.start_t

    def contains(self, t) -> bool:
        return self.start_t <= t < self.stop_t

    def with_blend(self, blend: Optional[Blend]) -> "Cut":
        return replace(self, blend=blend)

    # --------------------------------------------------
    def react(self, t) -> Optional[Any]:
        return self.behavior.react(t)

    def react_blend(self, value: Optional[Any], next_cut: "Cut", t) -> Optional[Any]:
        """
        Merge next_cut's output at t into value, which holds everything
        accumulated up to and including this cut.

          value is None          -> next_cut.react(t)
          no blend on this cut   -> value (next_cut is not consulted)
          blend on this cut      -> blend(value, next) if next is not None
                                    else value
        """
        if value is None:
            return next_cut.react(t)

        if self.blend is None:
            return value

        incoming = next_cut.react(t)
        if incoming is None:
            return value

        return self.blend(value, incoming)

    def __repr__(self) -> str:
        if self.blend is None:
            return f"Cut([{self.start_t!r}, {self.stop_t!r}))"
        name = getattr(self.blend, "__qualname__", repr(self.blend))
        return f"Cut([{self.start_t!r}, {self.stop_t!r}), blend={name})"
