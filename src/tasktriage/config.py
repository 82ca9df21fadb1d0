"""Settings for tasktriage, loaded from TASKTRIAGE_* environment variables.

Nothing here changes the encoded field format or the triage rules; settings only
cover the ambient parts of the package (logging).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TASKTRIAGE"

DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "tasktriage" / "logs"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    log_level: Optional[str]
    debug: bool
    log_to_file: bool
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        level = _env(_k("LOG_LEVEL")).strip().upper()
        return Settings(
            log_level=level or None,
            debug=_env_bool(_k("DEBUG"), False),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            log_dir=_env_path(_k("LOG_DIR"), DEFAULT_LOG_DIR),
        )
