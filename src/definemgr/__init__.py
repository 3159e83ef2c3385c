"""Keep a user-managed set of scripting defines in sync across build targets."""
from .core.errors import (
    DefineManagerError, TokenError, EmptyToken, InvalidCharacter, DuplicateToken,
    IndexOutOfRange, PersistenceUnavailable, TargetWriteFailed, ReplicationFailed,
)
from .core.tokens import validate, parse_flags, join_flags
from .managed import (
    ManagedEntry, ManagedSet, ManagedSetStore,
    ensure_size, derive_from_external, toggle, remove_at,
)
from .engine import reconcile, apply_to_one, apply_to_all, ReplicationReport
from .targets import Target, known_targets
from .session import DefineSession

__version__ = "0.1.0"
