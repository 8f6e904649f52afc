"""Settings loaded from environment variables."""

from __future__ import annotations

import locale
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from student_tasks.storage import STORAGE_KEY

logger = logging.getLogger(__name__)

ENV_PREFIX = "STUDENT_TASKS"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    storage_key: str
    log_level: str
    log_file: Optional[Path]
    collation_locale: str


def load_settings() -> Settings:
    log_level = _env(_k("LOG_LEVEL"), "INFO").upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    log_file_raw = _env(_k("LOG_FILE"))

    return Settings(
        data_dir=_env_path(_k("DATA_DIR"), Path.home() / ".student_tasks"),
        storage_key=_env(_k("STORAGE_KEY"), STORAGE_KEY),
        log_level=log_level,
        log_file=Path(log_file_raw).expanduser() if log_file_raw else None,
        collation_locale=_env(_k("LOCALE")),
    )


def apply_collation_locale(settings: Settings) -> bool:
    """Use the configured locale for title ordering; keep the current one if it is unavailable."""

    try:
        locale.setlocale(locale.LC_COLLATE, settings.collation_locale)
    except locale.Error:
        logger.warning("Collation locale %r unavailable; keeping current", settings.collation_locale)
        return False
    return True
