"""Merge managed define intent into a target's existing define set.

Defines not under management pass through untouched; every managed
define is dropped first and re-added only when its state is on, so the
result always matches the toggles exactly.
"""
from __future__ import annotations
from typing import Iterable, List, Sequence, Union

from ..core.tokens import parse_flags

def reconcile(
    external: Union[str, Iterable[str]],
    managed: Sequence[str],
    state: Sequence[bool],
) -> List[str]:
    if isinstance(external, str):
        external = parse_flags(external)
    working = set(external)
    working.difference_update(managed)
    for i, token in enumerate(managed):
        # short state vectors read as off
        if i < len(state) and state[i]:
            working.add(token)
    return sorted(working)
