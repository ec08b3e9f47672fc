"""
Environment + project-root helpers.

- `load_dotenv_if_present()`: best-effort `.env` loading (never overrides existing env vars)
- `get_project_root()`: find the repo root so relative paths (the cache dir) resolve the
  same way from the CLI, uvicorn, and pytest
- `resolve_project_path()`: resolve relative paths against the project root
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

_ROOT_MARKERS = (".env", ".git", "pyproject.toml")


def _looks_like_project_root(path: Path) -> bool:
    return any((path / marker).exists() for marker in _ROOT_MARKERS)


@lru_cache
def get_project_root() -> Path:
    """Return the best-guess project root directory (cached)."""
    override = os.getenv("SWIMSCORE_PROJECT_ROOT")
    if override:
        return Path(override).expanduser().resolve()

    cwd = Path.cwd().resolve()
    for candidate in (cwd, *cwd.parents):
        if _looks_like_project_root(candidate):
            return candidate

    # Installed outside a checkout: fall back to the working directory.
    return cwd


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None)."""
    explicit = os.getenv("SWIMSCORE_ENV_FILE")
    env_path = Path(explicit).expanduser().resolve() if explicit else get_project_root() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against the project root."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (get_project_root() / p).resolve()
