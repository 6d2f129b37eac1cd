# src/todo_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

With nothing set, the tracker uses ./todo.json and only logs warnings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_STORE_PATH = Path("todo.json")
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    store_path: Path
    log_level: str
    log_dir: Path | None

    @staticmethod
    def from_env(*, dotenv: bool = True) -> Settings:
        # .env is looked up from the working directory; real environment wins.
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            store_path=_env_path(_k("STORE_PATH"), DEFAULT_STORE_PATH) or DEFAULT_STORE_PATH,
            log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
            log_dir=_env_path(_k("LOG_DIR"), None),
        )


def get_settings() -> Settings:
    return Settings.from_env()
