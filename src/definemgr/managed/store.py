from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Protocol

import jsonschema

from ..core.errors import PersistenceUnavailable, TokenError
from ..core.logging import logger
from ..core.paths import SCHEMA
from ..core.tokens import validate
from .entries import ManagedEntry, ManagedSet

PREF_KEY = "DefineManager.AvailableDefines"
DEFAULT_TOKEN = "Debug_PlayerMovement"

class Prefs(Protocol):
    def get_string(self, key: str) -> Optional[str]: ...
    def set_string(self, key: str, value: str) -> None: ...

class JsonPrefs:
    """Flat key -> string map kept in a single JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.is_file():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("preferences file is not a JSON object")
        return data

    def get_string(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_string(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

@lru_cache(maxsize=1)
def _schema() -> dict:
    return json.loads((SCHEMA / "managed_list.schema.json").read_text(encoding="utf-8"))

class ManagedSetStore:
    def __init__(self, prefs: Prefs, key: str = PREF_KEY, default_token: str = DEFAULT_TOKEN):
        self.prefs = prefs
        self.key = key
        self.default_token = default_token

    def _default(self) -> ManagedSet:
        return ManagedSet.from_tokens([self.default_token])

    def load(self) -> ManagedSet:
        """Persisted list with every state off; the seed list when nothing is stored."""
        try:
            raw = self.prefs.get_string(self.key)
        except (OSError, ValueError) as e:
            raise PersistenceUnavailable(self.key, str(e)) from e
        if raw is None:
            logger.debug("No stored defines, using seed", token=self.default_token)
            return self._default()
        try:
            payload = json.loads(raw)
            jsonschema.validate(payload, _schema())
        except (ValueError, jsonschema.ValidationError) as e:
            logger.warn("Stored defines unreadable, using seed", key=self.key, error=str(e))
            return self._default()
        return ManagedSet(ManagedEntry(t) for t in self._clean(payload["items"] or []))

    def _clean(self, items: List[str]) -> List[str]:
        tokens: List[str] = []
        for item in items:
            try:
                tokens.append(validate(item, tokens))
            except TokenError as e:
                logger.warn("Dropping stored define", token=repr(item), error=str(e))
        return tokens

    def save(self, managed: ManagedSet):
        value = json.dumps({"items": managed.tokens()})
        try:
            self.prefs.set_string(self.key, value)
        except (OSError, ValueError) as e:
            raise PersistenceUnavailable(self.key, str(e)) from e
        logger.debug("Defines stored", key=self.key, count=len(managed))

    def add(self, managed: ManagedSet, candidate: str) -> ManagedEntry:
        return managed.add(candidate)

    def remove_at(self, managed: ManagedSet, index: int) -> ManagedEntry:
        return managed.remove_at(index)
