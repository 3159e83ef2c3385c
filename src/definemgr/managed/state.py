"""Parallel-list helpers for callers that keep tokens and states apart.

``ManagedSet`` makes these unnecessary, but hosts that hold two lists
(the token list and the toggle states) can still use them directly.
"""
from __future__ import annotations
from typing import Iterable, List, Sequence

from ..core.errors import IndexOutOfRange

def ensure_size(states: List[bool], tokens: Sequence[str]) -> List[bool]:
    """Pad with ``False`` or truncate from the tail, in place."""
    while len(states) < len(tokens):
        states.append(False)
    if len(states) > len(tokens):
        del states[len(tokens):]
    return states

def derive_from_external(tokens: Sequence[str], external: Iterable[str]) -> List[bool]:
    current = set(external)
    return [t in current for t in tokens]

def toggle(states: List[bool], index: int, value: bool) -> None:
    if not 0 <= index < len(states):
        raise IndexOutOfRange(index, len(states))
    states[index] = bool(value)

def remove_at(tokens: List[str], states: List[bool], index: int) -> str:
    """Drop a token and its state together; neither list changes on error."""
    if not 0 <= index < len(tokens):
        raise IndexOutOfRange(index, len(tokens))
    token = tokens.pop(index)
    if index < len(states):
        states.pop(index)
    return token
