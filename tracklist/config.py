import sys
from typing import Optional
from functools import lru_cache
from logging.config import dictConfig
import logging

from pydantic import BaseModel, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings
from pydantic_core import ValidationError


@lru_cache()
def get_settings():
    return Settings()


class Settings(BaseSettings):
    version: str = "1.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    default_max_size: int = 10
    prompt_capacity: bool = False

    @field_validator("default_max_size")
    @classmethod
    def validate_max_size(cls, v):
        """A list cannot have a negative capacity."""
        if v < 0:
            raise ValueError(f"default_max_size cannot be negative, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(env_file="config.env", extra="ignore")


try:
    settings = get_settings()
except ValidationError as e:
    logging.basicConfig(level=logging.ERROR)
    logging.fatal(
        "Invalid settings. Please inspect the below error and edit your config.env file."
    )
    logging.fatal(e)
    sys.exit(1)


class LogConfig(BaseModel):
    LOG_FORMAT: str = "%(asctime)s:%(levelname)s:%(module)s:%(message)s"
    version: int = 1
    disable_existing_loggers: bool = False
    formatters: dict = {
        "default": {
            "format": LOG_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
    handlers: dict = {
        "console": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    }
    loggers: dict = {
        "tracklist": {
            "handlers": ["console"],
            "level": "INFO",
        },
    }


def log_config(config: Settings) -> dict:
    """
    Build the dictConfig for the given settings. A rotating file handler is
    added only when `log_file` is set.
    """
    log_conf = LogConfig().model_dump()
    log_conf["loggers"]["tracklist"]["level"] = config.log_level
    if config.log_file:
        log_conf["handlers"]["file"] = {
            "formatter": "default",
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": config.log_file,
            "when": "midnight",
            "interval": 30,
            "backupCount": 6,
        }
        log_conf["loggers"]["tracklist"]["handlers"].append("file")
    return log_conf


dictConfig(log_config(settings))
log = logging.getLogger("tracklist")
