from __future__ import annotations
from typing import Optional

from .core.errors import TargetWriteFailed
from .core.logging import logger
from .core.tokens import parse_flags
from .engine import replicate
from .managed.entries import ManagedEntry, ManagedSet
from .managed.store import ManagedSetStore
from .targets import FlagStore, Target, known_targets

class DefineSession:
    """Everything one define-manager window needs, passed in explicitly.

    Hosts drive it: ``open`` on start, ``close`` on teardown, and
    ``refresh_if_target_changed`` whenever they notice the project's
    active target may have moved.
    """

    def __init__(self, store: ManagedSetStore, flags: FlagStore, apply_to_all: bool = False):
        self.store = store
        self.flags = flags
        self.apply_to_all = apply_to_all
        self.managed = ManagedSet()
        self.selected: Target = Target.UNKNOWN
        self._last_active: Target = Target.UNKNOWN

    def open(self, target: Optional[Target] = None) -> "DefineSession":
        self.managed = self.store.load()
        self._last_active = self.flags.active_target()
        self._switch(target or self._last_active)
        return self

    def close(self):
        self.store.save(self.managed)

    def reload(self):
        """Re-read the selected target and reset every toggle to match it."""
        self.managed.derive_from_external(parse_flags(self.flags.get_flags(self.selected)))

    def _switch(self, target: Target):
        self.selected = target
        self.reload()

    def select(self, target: Target):
        if target is Target.UNKNOWN:
            raise ValueError("Select a build target other than Unknown")
        self._switch(target)

    def use_current(self) -> Target:
        self._last_active = self.flags.active_target()
        self._switch(self._last_active)
        return self.selected

    def refresh_if_target_changed(self) -> bool:
        """Follow the project's active target, but only when it has moved since last seen.

        An explicit ``select`` stays in effect until the active target changes.
        """
        current = self.flags.active_target()
        if current == self._last_active:
            return False
        logger.debug("Active target changed", previous=self._last_active.value, current=current.value)
        self._last_active = current
        self._switch(current)
        return True

    def add(self, text: str) -> ManagedEntry:
        return self.store.add(self.managed, text)

    def remove(self, index: int) -> ManagedEntry:
        return self.store.remove_at(self.managed, index)

    def toggle(self, index: int, value: bool):
        self.managed.toggle(index, value)

    def save_defines(self, apply_to_all: Optional[bool] = None) -> replicate.ReplicationReport:
        """Write the toggles to the selected target, or to every target."""
        everywhere = self.apply_to_all if apply_to_all is None else apply_to_all
        tokens, states = self.managed.tokens(), self.managed.states()
        if everywhere:
            return replicate.apply_to_all(known_targets(), tokens, states, self.flags.get_flags, self.flags.set_flags)
        report = replicate.ReplicationReport()
        try:
            if self.selected is Target.UNKNOWN:
                raise TargetWriteFailed(self.selected, "write", "no build target selected")
            report.applied[self.selected] = replicate.apply_to_one(
                self.selected, tokens, states, self.flags.get_flags, self.flags.set_flags
            )
        except TargetWriteFailed as e:
            logger.error("Target save failed", target=self.selected.value, stage=e.stage, error=e.detail)
            report.failures.append(e)
        return report
