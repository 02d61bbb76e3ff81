# timecut/core/behavior.py
from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class Reactive(Protocol):
    """Anything that maps a time to an optional value."""

    def react(self, t: Any) -> Optional[Any]:
        ...


class Behavior:
    """
    Behavior (FROZEN)

    Reusable unit of logic:
      time -> value | None

    None means "disabled at t": a Cut consulting this behavior is then
    treated as inactive for blending at that instant.

    - no state of its own; the wrapped callable may close over some
    - must accept arbitrary, possibly non-monotonic, t
    - may back any number of Cuts
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[Any], Optional[Any]]):
        if not callable(fn):
            raise TypeError(f"[Behavior] expected a callable, got {type(fn).__name__}")
        self._fn = fn

    @classmethod
    def from_fn(cls, fn: Callable[[Any], Optional[Any]]) -> "Behavior":
        return cls(fn)

    @classmethod
    def constant(cls, value: Any) -> "Behavior":
        return cls(lambda _t: value)

    def react(self, t: Any) -> Optional[Any]:
        return self._fn(t)

    def __call__(self, t: Any) -> Optional[Any]:
        return self._fn(t)

    def __repr__(self) -> str:
        name = getattr(self._fn, "__qualname__", type(self._fn).__name__)
        return f"Behavior({name})"


def as_reactive(obj: Any) -> Reactive:
    """
    Accept a Reactive as-is, wrap a plain callable into a Behavior.
    """
    if isinstance(obj, Reactive):
        return obj
    if callable(obj):
        return Behavior(obj)
    raise TypeError(
        f"expected a Behavior, a Reactive or a callable, got {type(obj).__name__}"
    )
