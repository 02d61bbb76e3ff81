# timecut/core/scheduler.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from timecut.core.cut import Cut
from timecut.core.interrupt import Interrupt, InterruptFn
from timecut.core.time import SimpleLinearTimeGenerator, TimeGenerator
from timecut.core.track import Track
from timecut.utils.errors import StalledClockError
from timecut import logs


@dataclass(frozen=True)
class ScheduleReport:
    """Outcome of a bounded schedule() run."""

    steps: int
    interrupted: bool
    last_t: Any


class Scheduler:
    """
    Scheduler (FINAL / FROZEN)

    Owns:
      - a fixed tuple of tracks (tracks may overlap each other)
      - one TimeGenerator, the only thing a scheduler ever mutates

    Resolution at instant t:
      1. every track reports its active cut (track order)
      2. the first active cut seeds the value
      3. the remaining cuts are folded in left to right through
         Cut.react_blend, each merge governed by the cut just before

    Driving:
      - next_value() / prev_value(): tick / untick, evaluate at the pre-step t
      - iteration is open-ended; reset the generator to restart
      - schedule(): bounded run until the end of the last cut, optionally
        interruptible
    """

    def __init__(
        self,
        tracks: Iterable[Track],
        time_generator: TimeGenerator,
        *,
        max_steps: Optional[int] = None,
    ):
        self._tracks: Tuple[Track, ...] = tuple(tracks)
        self._time_gen = time_generator
        self._interrupt: Optional[InterruptFn] = None
        self.max_steps = max_steps

    @classmethod
    def new(cls, tracks: Iterable[Track], time_generator: TimeGenerator) -> "Scheduler":
        return cls(tracks, time_generator)

    @classmethod
    def from_config(cls, tracks: Iterable[Track], cfg) -> "Scheduler":
        """
        cfg: SchedulerConfig
        """
        return cls(
            tracks,
            SimpleLinearTimeGenerator.from_config(cfg),
            max_steps=cfg.max_steps,
        )

    # --------------------------------------------------
    @property
    def tracks(self) -> Tuple[Track, ...]:
        return self._tracks

    @property
    def time_generator(self) -> TimeGenerator:
        return self._time_gen

    @property
    def end(self):
        """Largest stop_t over all tracks, None when there is no cut at all."""
        ends = [tr.end for tr in self._tracks if not tr.is_empty()]
        return max(ends) if ends else None

    # --------------------------------------------------
    # Resolution (pure)
    # --------------------------------------------------
    def active_cuts(self, t) -> Iterator[Cut]:
        for track in self._tracks:
            cut = track.active(t)
            if cut is not None:
                yield cut

    def value_at(self, t) -> Optional[Any]:
        cuts = self.active_cuts(t)

        first = next(cuts, None)
        if first is None:
            return None

        value = first.react(t)
        prev = first

        for cut in cuts:
            value = prev.react_blend(value, cut, t)
            prev = cut

        return value

    # --------------------------------------------------
    # Stepping
    # --------------------------------------------------
    def next_value(self) -> Optional[Any]:
        t = self._time_gen.tick()
        return self.value_at(t)

    def prev_value(self) -> Optional[Any]:
        t = self._time_gen.untick()
        return self.value_at(t)

    def __iter__(self) -> "Scheduler":
        return self

    def __next__(self) -> Optional[Any]:
        # never exhausted: gaps yield None
        return self.next_value()

    # --------------------------------------------------
    # Bounded run
    # --------------------------------------------------
    def interruptible_with(self, interrupt: Optional[InterruptFn]) -> "Scheduler":
        """
        Install a predicate polled once per schedule() step, before dispatch.

        The predicate must not block: it is expected to read a flag or a
        queue filled by another thread.
        """
        self._interrupt = interrupt
        return self

    @logs.catch("schedule run failed")
    def schedule(
        self,
        on_value: Optional[Callable[[Any, Optional[Any]], None]] = None,
    ) -> ScheduleReport:
        """
        Reset the generator and dispatch every step until the current time
        reaches the end of the last cut.

        Each step: poll interrupt -> dispatch -> tick -> check end. The first
        step is always dispatched, even when the reset value is past the end.
        A tick that does not move time forward raises StalledClockError.

        on_value(t, value) receives each dispatched result.
        """
        end = self.end
        self._time_gen.reset()
        t = self._time_gen.current()

        if end is None:
            logs.info("[Scheduler] nothing to schedule")
            return ScheduleReport(steps=0, interrupted=False, last_t=t)

        logs.info(f"[Scheduler] start t={t} end={end} tracks={len(self._tracks)}")

        steps = 0
        interrupted = False

        while True:
            if self.max_steps is not None and steps >= self.max_steps:
                logs.warning(f"[Scheduler] max_steps={self.max_steps} reached at t={t}")
                break

            if self._interrupt is not None and self._interrupt(t) is Interrupt.BREAK:
                logs.info(f"[Scheduler] interrupted at t={t}")
                interrupted = True
                break

            value = self.value_at(t)
            if on_value is not None:
                on_value(t, value)
            steps += 1

            self._time_gen.tick()
            prev_t, t = t, self._time_gen.current()

            if not t > prev_t:
                raise StalledClockError(prev_t, t)

            if t >= end:
                break

        logs.info(f"[Scheduler] done steps={steps} last_t={t}")
        return ScheduleReport(steps=steps, interrupted=interrupted, last_t=t)

    def __repr__(self) -> str:
        return f"Scheduler(tracks={len(self._tracks)}, time_generator={self._time_gen!r})"
