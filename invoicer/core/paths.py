from __future__ import annotations

import sys
from pathlib import Path

APP_DIR_NAME = "Invoicer"
SETTINGS_FILE = "settings.json"


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def user_writable_dir() -> Path:
    """Directory for user-writable files such as settings.json.

    Frozen (PyInstaller) builds keep it next to the executable; dev runs use
    the project root.
    """
    if is_frozen():
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def settings_path() -> Path:
    return user_writable_dir() / SETTINGS_FILE


def default_export_dir() -> Path:
    """Documents/Invoicer, used until the user picks another folder."""
    return Path.home() / "Documents" / APP_DIR_NAME
