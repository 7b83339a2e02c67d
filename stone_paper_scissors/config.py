import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .art import ART_WIDTH

logger = logging.getLogger("stone_paper_scissors.config")

DEFAULT_BANNER_COMMAND = "figlet"
# Three arts side by side.
DEFAULT_BANNER_WIDTH = 3 * ART_WIDTH
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, value, default)
        return default


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    banner_command: str = Field(default=DEFAULT_BANNER_COMMAND, min_length=1)
    banner_width: int = Field(default=DEFAULT_BANNER_WIDTH, gt=0)
    no_delay: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return value

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings() -> Settings:
    width = _env_int("SPS_BANNER_WIDTH", DEFAULT_BANNER_WIDTH)
    if width <= 0:
        logger.warning("Ignoring SPS_BANNER_WIDTH=%d, using %d", width, DEFAULT_BANNER_WIDTH)
        width = DEFAULT_BANNER_WIDTH
    level = os.getenv("SPS_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    if level not in LOG_LEVELS:
        logger.warning("Ignoring SPS_LOG_LEVEL=%r, using %s", level, DEFAULT_LOG_LEVEL)
        level = DEFAULT_LOG_LEVEL
    return Settings(
        banner_command=os.getenv("SPS_BANNER_COMMAND", "").strip() or DEFAULT_BANNER_COMMAND,
        banner_width=width,
        no_delay=_env_bool("SPS_NO_DELAY", False),
        log_level=level,
    )
