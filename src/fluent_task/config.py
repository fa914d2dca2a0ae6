# src/fluent_task/config.py

"""Settings loaded from environment variables (+ optional .env).

One frozen Settings object for the whole app; every variable has a default,
so nothing has to be set for the demo to run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "FLUENT_TASK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "fluent-task").strip() or "fluent-task",
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/fluent_task")),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
