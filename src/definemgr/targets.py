"""Build targets and the per-target define string store."""
from __future__ import annotations
import json
from enum import Enum
from pathlib import Path
from typing import Dict, List, Protocol

from .core.logging import logger

class Target(str, Enum):
    UNKNOWN = "Unknown"
    STANDALONE = "Standalone"
    IOS = "iOS"
    ANDROID = "Android"
    WEBGL = "WebGL"
    WSA = "WSA"
    PS4 = "PS4"
    PS5 = "PS5"
    XBOXONE = "XboxOne"
    TVOS = "tvOS"
    SWITCH = "Switch"
    VISIONOS = "VisionOS"
    LINUX_SERVER = "LinuxHeadlessSimulation"

    @classmethod
    def parse(cls, name: str) -> "Target":
        key = str(name or "").strip().lower()
        for t in cls:
            if t.value.lower() == key or t.name.lower() == key:
                return t
        raise ValueError(f"Unknown build target '{name}'")

def known_targets() -> List[Target]:
    return [t for t in Target if t is not Target.UNKNOWN]

class FlagStore(Protocol):
    def get_flags(self, target: Target) -> str: ...
    def set_flags(self, target: Target, value: str) -> None: ...
    def active_target(self) -> Target: ...

class ProjectFlagsFile:
    """Scripting defines per target, kept in one JSON project file.

    Layout: ``{"active_target": "Standalone", "scripting_defines": {"Android": "A;B"}}``
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.is_file():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} is not a JSON object")
        return data

    def _defines(self, data: dict) -> Dict[str, str]:
        defines = data.get("scripting_defines")
        return defines if isinstance(defines, dict) else {}

    def get_flags(self, target: Target) -> str:
        value = self._defines(self._read()).get(target.value, "")
        return value if isinstance(value, str) else ""

    def set_flags(self, target: Target, value: str) -> None:
        data = self._read()
        defines = self._defines(data)
        defines[target.value] = value
        data["scripting_defines"] = defines
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        logger.debug("Project defines written", target=target.value, path=str(self.path))

    def active_target(self) -> Target:
        name = self._read().get("active_target")
        if not name:
            return Target.STANDALONE
        try:
            return Target.parse(name)
        except ValueError:
            logger.warn("Unrecognised active target", value=name)
            return Target.UNKNOWN

