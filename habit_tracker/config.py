"""
Runtime settings, read from environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DB_PATH_DEFAULT = os.path.join("data", "habits.db")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    db_path: str = DB_PATH_DEFAULT
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        db_path=os.getenv("HABIT_TRACKER_DB_PATH", DB_PATH_DEFAULT),
        log_level=os.getenv("HABIT_TRACKER_LOG_LEVEL", "INFO").upper(),
    )


def setup_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
