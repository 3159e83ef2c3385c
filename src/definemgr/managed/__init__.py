from .entries import ManagedEntry, ManagedSet
from .state import ensure_size, derive_from_external, toggle, remove_at
from .store import ManagedSetStore, JsonPrefs, Prefs, PREF_KEY, DEFAULT_TOKEN

__all__ = [
    "ManagedEntry", "ManagedSet",
    "ensure_size", "derive_from_external", "toggle", "remove_at",
    "ManagedSetStore", "JsonPrefs", "Prefs", "PREF_KEY", "DEFAULT_TOKEN",
]
