"""Target registry: creep id -> task lock, kept across ticks.

The registry lives in process memory, so it is empty again after a restart.
It is owned by whoever drives the tick loop and passed down explicitly;
there is no module-level instance.

Usage:
    registry = TargetRegistry()
    registry.assign(creep.id, Harvest(source.id))
    lock = registry.get(creep.id)
    registry.release(creep.id)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from creeptick.core.identity import ObjectId
from creeptick.core.task import TaskLock, is_task_lock

if TYPE_CHECKING:
    from creeptick.host.protocol import Creep

type CreepKey = ObjectId[Creep]


class TargetRegistry:
    """Mapping of creep id to its current TaskLock.

    At most one lock per creep. Locks are replaced wholesale by assign() and
    removed by release(). Entries for creeps that have since died are left in
    place; they cost memory but never affect decisions, because lookups are
    only made for creeps that are alive this tick.
    """

    def __init__(self) -> None:
        self._locks: dict[CreepKey, TaskLock] = {}

    def get(self, creep_id: CreepKey) -> TaskLock | None:
        """Get the lock held by a creep.

        Args:
            creep_id: Creep to look up.

        Returns:
            The lock, or None if the creep is unassigned.
        """
        return self._locks.get(creep_id)

    def assign(self, creep_id: CreepKey, lock: TaskLock) -> None:
        """Set a creep's lock, replacing any previous one.

        Args:
            creep_id: Creep receiving the lock.
            lock: Charge, Upgrade or Harvest lock.

        Raises:
            TypeError: If creep_id is not an ObjectId or lock is not a TaskLock variant.
        """
        if not isinstance(creep_id, ObjectId):
            raise TypeError(f"Expected ObjectId key, got {type(creep_id).__name__}")
        if not is_task_lock(lock):
            raise TypeError(f"Expected Charge, Upgrade or Harvest, got {type(lock).__name__}")
        self._locks[creep_id] = lock

    def release(self, creep_id: CreepKey) -> bool:
        """Remove a creep's lock.

        Returns:
            True if a lock was removed, False if the creep had none.
        """
        return self._locks.pop(creep_id, None) is not None

    def clear(self) -> None:
        """Drop every lock."""
        self._locks.clear()

    def items(self) -> Iterator[tuple[CreepKey, TaskLock]]:
        yield from self._locks.items()

    def snapshot(self) -> dict[CreepKey, TaskLock]:
        """Shallow copy of the current mapping. Locks are immutable, so this is safe to keep."""
        return dict(self._locks)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """JSON-friendly view: creep id -> {"task": variant name, "target": target id}."""
        return {
            str(creep_id): {"task": type(lock).__name__, "target": str(lock.target)}
            for creep_id, lock in self._locks.items()
        }

    def __contains__(self, creep_id: object) -> bool:
        return creep_id in self._locks

    def __len__(self) -> int:
        return len(self._locks)

    def __iter__(self) -> Iterator[CreepKey]:
        return iter(self._locks)
