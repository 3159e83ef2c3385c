from __future__ import annotations
import os
from pathlib import Path

SCHEMA = Path(__file__).resolve().parents[1] / "schema"
SETTINGS_FILENAME = ".definemgr_settings.json"
SETTINGS_ENV = "DEFINEMGR_SETTINGS"
PREFS_FILENAME = ".definemgr_prefs.json"
PROJECT_FILENAME = "ProjectSettings/scripting_defines.json"

def home_dir() -> Path:
    """Writable home directory, falling back to the working directory."""
    home = Path(os.path.expanduser("~"))
    if home.is_dir() and os.access(home, os.W_OK):
        return home
    return Path.cwd()
