# timecut/core/blend.py
"""
Stock blend functions.

A blend merges two values produced at the same instant by cuts on
different tracks:

    blend(accumulated, incoming) -> merged

Blends must be pure. Any (A, A) -> A callable works; the ones below
cover the usual compositing modes.
"""
from __future__ import annotations

from typing import Any, Callable

Blend = Callable[[Any, Any], Any]


def add(acc, incoming):
    return acc + incoming


def override(acc, incoming):
    return incoming


def keep(acc, incoming):
    return acc


def maximum(acc, incoming):
    return incoming if incoming > acc else acc


def minimum(acc, incoming):
    return incoming if incoming < acc else acc


def mix(alpha: float) -> Blend:
    """
    Linear interpolation: alpha = 0 keeps acc, alpha = 1 takes incoming.
    """
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"[blend.mix] alpha must be in [0, 1], got {alpha}")

    def _mix(acc, incoming):
        return acc * (1.0 - alpha) + incoming * alpha

    _mix.__qualname__ = f"mix({alpha})"
    return _mix
