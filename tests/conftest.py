# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from timecut.core import Behavior, Cut, Track, SimpleLinearTimeGenerator


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


@pytest.fixture
def double() -> Behavior:
    return Behavior.from_fn(lambda t: t * 2.0)


@pytest.fixture
def gen() -> SimpleLinearTimeGenerator:
    return SimpleLinearTimeGenerator(0.0, 0.1)


@pytest.fixture
def three_cut_track(double) -> Track:
    """
    [0, 1) [1, 2) gap [3, 20)
    """
    return Track([
        Cut(0.0, 1.0, double),
        Cut(1.0, 2.0, double),
        Cut(3.0, 20.0, double),
    ])
