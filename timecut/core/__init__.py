"""
Core Dispatch Model (FINAL / FROZEN)

Defines WHAT a schedule is, independent of configuration or any CLI.

Invariants:
- Intervals are half-open: [start_t, stop_t).
- A Track never holds two overlapping cuts; tracks may overlap each other.
- Tracks are immutable once built.
- The TimeGenerator is the only mutable state, stepped by the Scheduler.

Core explicitly does NOT:
- Perform IO or deserialize window definitions
- Spawn threads or wait on anything
- Decide how fast time advances (that is the generator's job)
"""
from .time import TimeGenerator, SimpleLinearTimeGenerator, SimpleF32TimeGenerator
from .behavior import Behavior, Reactive
from .blend import Blend
from .cut import Cut
from .track import Track, Placement, locate
from .interrupt import Interrupt, FlagInterrupt
from .scheduler import Scheduler, ScheduleReport

__all__ = [
    "TimeGenerator", "SimpleLinearTimeGenerator", "SimpleF32TimeGenerator",
    "Behavior", "Reactive",
    "Blend",
    "Cut",
    "Track", "Placement", "locate",
    "Interrupt", "FlagInterrupt",
    "Scheduler", "ScheduleReport",
]
