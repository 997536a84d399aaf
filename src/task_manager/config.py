# src/task_manager/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time.
- Kubernetes overlays only need to set TASK_MANAGER_* env vars.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASK_MANAGER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


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
    db_path: Path

    # ---- HTTP ----
    host: str
    port: int
    cors_origins: list[str]
    debug: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-manager")
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_manager"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "tasks.sqlite3")

        host = _env(_k("HOST"), "0.0.0.0")
        port = _env_int(_k("PORT"), 8080)
        cors_origins = _env_list(_k("CORS_ORIGINS"), ["*"])
        debug = _env_bool(_k("DEBUG"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            db_path=db_path,
            host=host,
            port=port,
            cors_origins=cors_origins,
            debug=debug,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
