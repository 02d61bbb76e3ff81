from .app_config import AppConfig
from .log_config import LogConfig
from .scheduler_config import SchedulerConfig

__all__ = ["AppConfig", "LogConfig", "SchedulerConfig"]
