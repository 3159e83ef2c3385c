"""Define tokens and the ``;``-separated flag string they live in.

A token is a single scripting define: non-empty, no whitespace, no
separator. Comparison is exact and case-sensitive everywhere.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from .errors import EmptyToken, InvalidCharacter, DuplicateToken

SEPARATOR = ";"

def validate(candidate: Optional[str], managed: Iterable[str] = ()) -> str:
    """Return the trimmed token or raise the matching ``TokenError``.

    Nothing is mutated; the caller appends the result.
    """
    if candidate is None or not candidate.strip():
        raise EmptyToken(candidate or "")
    cleaned = candidate.strip()
    for ch in cleaned:
        if ch == SEPARATOR or ch.isspace():
            raise InvalidCharacter(cleaned, ch)
    if cleaned in managed:
        raise DuplicateToken(cleaned)
    return cleaned

def parse_flags(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    seen = set()
    out: List[str] = []
    for part in raw.split(SEPARATOR):
        token = part.strip()
        if token and token not in seen:
            seen.add(token)
            out.append(token)
    return out

def join_flags(tokens: Iterable[str]) -> str:
    return SEPARATOR.join(tokens)
