"""Environment-driven settings, optionally loaded from a ``.env`` file."""

from __future__ import annotations
from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    log_format: str = DEFAULT_LOG_FORMAT
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> Settings:
        level_name = os.getenv("PPM_EDITOR_LOG_LEVEL", "INFO").upper()
        # getLevelName maps unknown names to a "Level X" string
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO
        return cls(
            log_level=level,
            log_format=os.getenv("PPM_EDITOR_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            encoding=os.getenv("PPM_EDITOR_ENCODING", "utf-8"),
        )


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        datefmt=DEFAULT_DATE_FORMAT,
    )
