from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Sequence

from ..core.errors import ReplicationFailed, TargetWriteFailed
from ..core.logging import logger
from ..core.tokens import join_flags
from ..targets import Target
from .reconcile import reconcile

ReadFlags = Callable[[Target], str]
WriteFlags = Callable[[Target, str], None]

@dataclass
class ReplicationReport:
    applied: Dict[Target, List[str]] = field(default_factory=dict)
    failures: List[TargetWriteFailed] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def failed_targets(self) -> List[Target]:
        return [f.target for f in self.failures]

    def raise_for_failures(self):
        if self.failures:
            raise ReplicationFailed(self.failures)

def apply_to_one(
    target: Target,
    managed: Sequence[str],
    state: Sequence[bool],
    read: ReadFlags,
    write: WriteFlags,
) -> List[str]:
    """Reconcile one target and write the result back; returns the written defines."""
    try:
        current = read(target)
    except Exception as e:
        raise TargetWriteFailed(target, "read", str(e)) from e
    final = reconcile(current or "", managed, state)
    try:
        write(target, join_flags(final))
    except Exception as e:
        raise TargetWriteFailed(target, "write", str(e)) from e
    logger.info("Defines saved", target=target.value, count=len(final))
    return final

def apply_to_all(
    targets: Iterable[Target],
    managed: Sequence[str],
    state: Sequence[bool],
    read: ReadFlags,
    write: WriteFlags,
) -> ReplicationReport:
    """Apply to every target except ``Target.UNKNOWN``, each one independently.

    No rollback: targets written before a failure stay written, and the
    failure is reported alongside them.
    """
    report = ReplicationReport()
    for target in targets:
        if target is Target.UNKNOWN:
            continue
        try:
            report.applied[target] = apply_to_one(target, managed, state, read, write)
        except TargetWriteFailed as e:
            logger.error("Target save failed", target=target.value, stage=e.stage, error=e.detail)
            report.failures.append(e)
    logger.info("Defines applied to all targets", applied=len(report.applied), failed=len(report.failures))
    return report
