from __future__ import annotations
import sys
from datetime import datetime, timezone
from typing import Literal, Any, Optional, TextIO

from colorama import Fore, Style, init as colorama_init

colorama_init()

COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED,
}

Level = Literal["DEBUG","INFO","WARN","ERROR"]
LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")

class Logger:
    def __init__(self, level: Level = "INFO", stream: Optional[TextIO] = None):
        self.level_order = {"DEBUG":10,"INFO":20,"WARN":30,"ERROR":40}
        self.threshold = self.level_order[level]
        self._stream = stream

    def set_level(self, level: Level):
        self.threshold = self.level_order[level]

    def _emit(self, level: Level, msg: str, **extra: Any):
        if self.level_order[level] < self.threshold:
            return
        stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        extrastr = (" " + " ".join(f"{k}={v}" for k,v in extra.items())) if extra else ""
        # resolved per call so redirected/captured stderr is honoured
        stream = self._stream or sys.stderr
        stream.write(f"{COLORS[level]}{stamp} [{level}] {msg}{extrastr}{Style.RESET_ALL}\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def info(self, msg: str, **kw): self._emit("INFO", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)
    def error(self, msg: str, **kw): self._emit("ERROR", msg, **kw)

logger = Logger("INFO")
