from .logger import Logging, logs
from .errors import (
    TimecutError,
    InvalidIntervalError,
    OverlappingCutsError,
    ConfigError,
    StalledClockError,
)

__all__ = [
    "Logging", "logs",
    "TimecutError",
    "InvalidIntervalError",
    "OverlappingCutsError",
    "ConfigError",
    "StalledClockError",
]
