from .reconcile import reconcile
from .replicate import apply_to_one, apply_to_all, ReplicationReport

__all__ = ["reconcile", "apply_to_one", "apply_to_all", "ReplicationReport"]
