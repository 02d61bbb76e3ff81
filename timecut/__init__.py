#!filepath: timecut/__init__.py

from .utils.logger import Logging, logs
from .config.app_config import AppConfig
from .core import (
    Behavior,
    Cut,
    Track,
    Scheduler,
    ScheduleReport,
    TimeGenerator,
    SimpleLinearTimeGenerator,
    SimpleF32TimeGenerator,
    Interrupt,
    FlagInterrupt,
)
from .core import blend

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "Behavior", "Cut", "Track", "Scheduler", "ScheduleReport",
    "TimeGenerator", "SimpleLinearTimeGenerator", "SimpleF32TimeGenerator",
    "Interrupt", "FlagInterrupt",
    "blend",
    "__version__",
]
