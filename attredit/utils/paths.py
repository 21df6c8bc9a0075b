"""Module: paths.py.

Author: Michael Economou
Date: 2026-02-02

Centralized path management for attredit.

Platform-specific behavior:
- Windows: %LOCALAPPDATA%/attredit/
- Linux: $XDG_DATA_HOME/attredit/ (default ~/.local/share/attredit/)
- macOS: ~/Library/Application Support/attredit/

Directory Structure:
    <user_data_dir>/
    ├── config.json          # User preferences
    └── logs/                # Log files
"""

import os
import platform
from pathlib import Path

from attredit.config import APP_NAME


class AppPaths:
    """Centralized, lazily created application paths."""

    _user_data_dir: Path | None = None

    @classmethod
    def _get_platform_data_dir(cls) -> Path:
        """Get platform-specific user data directory."""
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("LOCALAPPDATA")
            if not base:
                base = str(Path(os.environ.get("USERPROFILE", "")) / "AppData" / "Local")
            return Path(base) / APP_NAME

        if system == "Darwin":
            return Path.home() / "Library" / "Application Support" / APP_NAME

        base = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
        return Path(base) / APP_NAME

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """Return (and create) the user data directory."""
        if cls._user_data_dir is None:
            cls._user_data_dir = cls._get_platform_data_dir()
        cls._user_data_dir.mkdir(parents=True, exist_ok=True)
        return cls._user_data_dir

    @classmethod
    def get_logs_dir(cls) -> Path:
        """Return (and create) the logs directory."""
        logs_dir = cls.get_user_data_dir() / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        return logs_dir

    @classmethod
    def set_user_data_dir(cls, path: str | Path | None) -> None:
        """Override the user data directory (tests, portable installs)."""
        cls._user_data_dir = Path(path) if path is not None else None
