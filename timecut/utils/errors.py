# timecut/utils/errors.py
from __future__ import annotations


class TimecutError(RuntimeError):
    """
    Base class of every error raised by timecut.
    """


class InvalidIntervalError(TimecutError, ValueError):
    """
    Raised when a Cut is built with start_t > stop_t (or unordered bounds).
    """

    def __init__(self, start_t, stop_t):
        self.start_t = start_t
        self.stop_t = stop_t
        super().__init__(
            f"[Cut] invalid interval: start_t={start_t!r} > stop_t={stop_t!r}"
        )


class OverlappingCutsError(TimecutError, ValueError):
    """
    Raised when two cuts of the same track overlap.
    Overlap across different tracks is legal.
    """

    def __init__(self, previous, following):
        self.previous = previous
        self.following = following
        super().__init__(
            "[Track] overlapping cuts: "
            f"{following!r} starts before {previous!r} stops"
        )


class ConfigError(TimecutError):
    """
    Raised for an invalid configuration file.
    """


class StalledClockError(TimecutError):
    """
    Raised by a bounded run when a tick does not move time forward.
    """

    def __init__(self, before, after):
        self.before = before
        self.after = after
        super().__init__(
            f"[Scheduler] time did not advance: tick moved {before!r} to {after!r}"
        )
