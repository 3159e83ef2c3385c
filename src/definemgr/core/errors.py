from __future__ import annotations

class DefineManagerError(Exception):
    """Base for internal errors."""

class TokenError(DefineManagerError):
    def __init__(self, token: str, detail: str):
        super().__init__(detail)
        self.token = token
        self.detail = detail

class EmptyToken(TokenError):
    def __init__(self, token: str = ""):
        super().__init__(token, "Empty define not allowed")

class InvalidCharacter(TokenError):
    def __init__(self, token: str, char: str):
        super().__init__(token, f"Invalid define '{token}': avoid spaces or ';' (found {char!r})")
        self.char = char

class DuplicateToken(TokenError):
    def __init__(self, token: str):
        super().__init__(token, f"Define '{token}' already exists")

class IndexOutOfRange(DefineManagerError):
    def __init__(self, index: int, size: int):
        super().__init__(f"Index {index} out of range for {size} entries")
        self.index = index
        self.size = size

class PersistenceUnavailable(DefineManagerError):
    def __init__(self, key: str, detail: str):
        super().__init__(f"Preferences unavailable for '{key}': {detail}")
        self.key = key
        self.detail = detail

class TargetWriteFailed(DefineManagerError):
    def __init__(self, target, stage: str, detail: str):
        name = getattr(target, "value", target)
        super().__init__(f"Target '{name}' {stage} failed: {detail}")
        self.target = target
        self.stage = stage
        self.detail = detail

class ReplicationFailed(DefineManagerError):
    def __init__(self, failures: list):
        names = ", ".join(str(getattr(f.target, "value", f.target)) for f in failures)
        super().__init__(f"{len(failures)} target(s) failed: {names}")
        self.failures = list(failures)
