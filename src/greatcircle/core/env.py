"""
Environment helpers.

Developers may keep settings such as `GREATCIRCLE_LOG_LEVEL` in a repo-local `.env`
file. `load_dotenv_if_present()` loads it once, never overriding variables that are
already set in the process environment.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


def _iter_parents(start: Path) -> list[Path]:
    start = start.resolve()
    return [start, *list(start.parents)]


def find_env_file() -> Path | None:
    """Return the `.env` to load: `GREATCIRCLE_ENV_FILE`, else the nearest one above CWD."""
    explicit = os.getenv("GREATCIRCLE_ENV_FILE")
    if explicit:
        env_path = Path(explicit).expanduser().resolve()
        return env_path if env_path.is_file() else None

    for candidate in _iter_parents(Path.cwd()):
        env_path = candidate / ".env"
        if env_path.is_file():
            return env_path
        # Stop at the repository boundary.
        if (candidate / ".git").exists() or (candidate / "pyproject.toml").is_file():
            break
    return None


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None)."""
    env_path = find_env_file()
    if env_path is None:
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path
