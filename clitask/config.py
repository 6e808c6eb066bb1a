"""
CLITASK - Settings
==================
Settings come from CLITASK_* environment variables; CLI flags override them.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator

from .manager import DEFAULT_DONE_FILE, DEFAULT_OPEN_FILE

ENV_PREFIX = "CLITASK"


def _env(suffix: str, default: str) -> str:
    """Read CLITASK_<suffix>; blank values fall back to default"""
    raw = os.getenv(f"{ENV_PREFIX}_{suffix}")
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


class Settings(BaseModel):
    tasks_dir: Path = Path(".")
    open_file: str = DEFAULT_OPEN_FILE
    done_file: str = DEFAULT_DONE_FILE
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def from_env(cls, tasks_dir: Optional[str] = None, verbose: bool = False) -> "Settings":
        """Build settings from the environment, applying CLI overrides"""
        return cls(
            tasks_dir=Path(tasks_dir or _env("DIR", ".")).expanduser(),
            open_file=_env("OPEN_FILE", DEFAULT_OPEN_FILE),
            done_file=_env("DONE_FILE", DEFAULT_DONE_FILE),
            log_level="INFO" if verbose else _env("LOG_LEVEL", "WARNING"),
        )
