#!filepath: timecut/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from .log_config import LogConfig
from .scheduler_config import SchedulerConfig
from timecut.utils.errors import ConfigError


def project_root() -> str:
    """
    Project root derived from this file:
    timecut/config/app_config.py -> timecut/config -> timecut -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


# environment variable -> (section, field)
_ENV_OVERRIDES = {
    "TIMECUT_LOG_LEVEL": ("log", "level"),
    "TIMECUT_DELTA": ("scheduler", "delta"),
    "TIMECUT_RESET_VALUE": ("scheduler", "reset_value"),
}


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    scheduler: SchedulerConfig = SchedulerConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to timecut/config/base.yml
        - independent of the current working directory
        - TIMECUT_* environment variables override file values
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ConfigError(f"[AppConfig] top level of {path} must be a mapping")

        for env_name, (section, key) in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is None:
                continue

            section_raw = raw.get(section) or {}
            if not isinstance(section_raw, dict):
                raise ConfigError(
                    f"[AppConfig] section '{section}' of {path} must be a mapping "
                    f"to apply {env_name}"
                )
            raw[section] = {**section_raw, key: value}

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ConfigError(f"[AppConfig] invalid config {path}: {e}") from e
