"""
Configuration helpers for the feedback backend.

Routers/services never read os.environ directly; they receive a Settings
instance (usually via get_settings) built from the process environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import logging
import os

DEFAULT_PORT = 3001
DEFAULT_DATA_FILENAME = "feedback-data.json"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None) -> Path:
        raw = (value or "").strip()
        if not raw:
            return (Path.cwd() / DEFAULT_DATA_FILENAME).resolve()
        return Path(raw).expanduser().resolve()

    def _level(value: str | None) -> str:
        name = (value or DEFAULT_LOG_LEVEL).strip().upper()
        # getLevelName returns the numeric level only for registered names
        if isinstance(logging.getLevelName(name), int):
            return name
        return DEFAULT_LOG_LEVEL

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT"), DEFAULT_PORT),
        data_file=_path(os.getenv("FEEDBACK_DATA_FILE")),
        log_level=_level(os.getenv("LOG_LEVEL")),
    )
