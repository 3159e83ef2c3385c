from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from ..core.errors import IndexOutOfRange
from ..core.logging import logger
from ..core.tokens import validate

@dataclass
class ManagedEntry:
    token: str
    enabled: bool = False

class ManagedSet:
    """Ordered managed defines, each paired with its on/off state.

    Order is insertion order and only matters for display.
    """

    def __init__(self, entries: Optional[Iterable[ManagedEntry]] = None):
        self._entries: List[ManagedEntry] = []
        for entry in entries or ():
            self._entries.append(ManagedEntry(validate(entry.token, self.tokens()), entry.enabled))

    @classmethod
    def from_tokens(cls, tokens: Iterable[str], states: Optional[Sequence[bool]] = None) -> "ManagedSet":
        states = states or ()
        return cls(
            ManagedEntry(t, bool(states[i]) if i < len(states) else False)
            for i, t in enumerate(tokens)
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ManagedEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> ManagedEntry:
        self._check(index)
        return self._entries[index]

    def __contains__(self, token: object) -> bool:
        return any(e.token == token for e in self._entries)

    def _check(self, index: int):
        if not 0 <= index < len(self._entries):
            raise IndexOutOfRange(index, len(self._entries))

    def tokens(self) -> List[str]:
        return [e.token for e in self._entries]

    def states(self) -> List[bool]:
        return [e.enabled for e in self._entries]

    def enabled_tokens(self) -> List[str]:
        return [e.token for e in self._entries if e.enabled]

    def add(self, candidate: str) -> ManagedEntry:
        token = validate(candidate, self.tokens())
        entry = ManagedEntry(token)
        self._entries.append(entry)
        logger.debug("DefineAdded", token=token)
        return entry

    def remove_at(self, index: int) -> ManagedEntry:
        self._check(index)
        entry = self._entries.pop(index)
        logger.debug("DefineRemoved", token=entry.token, index=index)
        return entry

    def toggle(self, index: int, value: bool):
        self._check(index)
        self._entries[index].enabled = bool(value)

    def derive_from_external(self, external: Iterable[str]):
        """Reset every state to membership in ``external``."""
        current = set(external)
        for e in self._entries:
            e.enabled = e.token in current
        logger.debug("StatesDerived", enabled=len(self.enabled_tokens()), total=len(self._entries))
