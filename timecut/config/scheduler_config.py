from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SchedulerConfig(BaseModel):
    """
    SchedulerConfig

    Semantics:
      - how the reference linear generator steps
      - an optional hard cap on bounded runs
      - does NOT describe cuts or tracks (those are built in code)
    """

    # generator start / reset point
    reset_value: float = 0.0

    # step size for tick / untick; schedule() only runs forward
    delta: float = 0.1

    # schedule() stops after this many dispatched steps (None = until end)
    max_steps: Optional[int] = Field(default=None, ge=1)

    @field_validator("delta")
    @classmethod
    def _positive_delta(cls, v: float) -> float:
        if not v > 0:
            raise ValueError(f"delta must be > 0, got {v}")
        return v
