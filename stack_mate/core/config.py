"""
Settings for the application.

Read once from environment variables when this module is imported. Everything has a default, so tests and a local
run need no setup at all.
"""

import os
from dataclasses import dataclass


def _get_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str
    sql_echo: bool
    log_level: str


def load_settings() -> Settings:
    return Settings(
        database_url=os.environ.get(
            "STACK_MATE_DATABASE_URL", "sqlite:///./stack_mate.db"
        ),
        sql_echo=_get_bool("STACK_MATE_SQL_ECHO", False),
        log_level=os.environ.get("STACK_MATE_LOG_LEVEL", "INFO").upper(),
    )


SETTINGS = load_settings()
