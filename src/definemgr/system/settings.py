from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from definemgr.core.logging import logger, LEVELS
from definemgr.core.paths import SETTINGS_FILENAME, SETTINGS_ENV, PREFS_FILENAME, PROJECT_FILENAME, home_dir

@dataclass
class SettingsData:
    log_level: str = "INFO"
    prefs_path: str = ""          # blank -> ~/.definemgr_prefs.json
    project_path: str = PROJECT_FILENAME
    apply_to_all: bool = False

    def normalize(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LEVELS:
            self.log_level = "INFO"
        if not isinstance(self.apply_to_all, bool):
            self.apply_to_all = False
        if not self.project_path:
            self.project_path = PROJECT_FILENAME

    def resolved_prefs_path(self) -> Path:
        if self.prefs_path:
            return Path(os.path.expanduser(self.prefs_path))
        return home_dir() / PREFS_FILENAME

    def resolved_project_path(self) -> Path:
        return Path(os.path.expanduser(self.project_path))

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        override = os.environ.get(SETTINGS_ENV)
        if override:
            return Path(os.path.expanduser(override))
        return home_dir() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        path = Path(path) if path else cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                known = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in known})
                data.normalize()
                logger.debug("Loaded settings", path=str(path))
                return cls(data, path)
            except (ValueError, TypeError, AttributeError) as e:
                logger.warn("Failed to parse settings, using defaults", error=str(e))
        return cls(SettingsData(), path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("Settings saved", path=str(self.path))
        except OSError as e:
            logger.error("Failed to save settings", error=str(e))

    def apply_log_level(self):
        logger.set_level(self.data.log_level)
