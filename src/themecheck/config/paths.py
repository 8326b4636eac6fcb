"""Shared path utilities for configuration and data locations.

This module centralizes how the application discovers locations for
config, data and log files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml``
- Data: repository-root ``<repo_root>/.data``
- Logs: repository-root ``<repo_root>/logs``
"""

from __future__ import annotations

from pathlib import Path


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the main TOML config file.

    Portable layout: ``<repo_root>/config/config.toml``.
    """
    repo_root = _detect_repo_root()
    return (repo_root / "config" / "config.toml").resolve()


def default_data_dir() -> Path:
    """Get the default directory for app data (the options database)."""

    return (_detect_repo_root() / ".data").resolve()


def default_database_path() -> Path:
    """Get the default SQLite file backing the option store."""

    return (default_data_dir() / "themecheck.db").resolve()


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "themecheck.log").resolve()


__all__ = [
    "default_config_path",
    "default_data_dir",
    "default_database_path",
    "default_log_dir",
    "default_log_file",
]
