"""Task lock models.

A TaskLock is a creep's committed task. Exactly one variant is active at a
time; locks are immutable and are replaced wholesale, never edited.

Usage:
    lock = Harvest(source.id)
    match lock:
        case Harvest(target):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from creeptick.core.identity import ObjectId

if TYPE_CHECKING:
    from creeptick.host.protocol import Controller, Source, Spawn


def _require_object_id(lock: object, target: object) -> None:
    # Live handles expire at the end of the tick; only ids may be persisted.
    if not isinstance(target, ObjectId):
        raise TypeError(
            f"{type(lock).__name__} target must be an ObjectId, got {type(target).__name__}"
        )


@dataclass(frozen=True, slots=True)
class Charge:
    """Deliver resource to a structure that accepts it."""

    target: ObjectId[Spawn]

    def __post_init__(self) -> None:
        _require_object_id(self, self.target)


@dataclass(frozen=True, slots=True)
class Upgrade:
    """Spend carried resource on a room controller."""

    target: ObjectId[Controller]

    def __post_init__(self) -> None:
        _require_object_id(self, self.target)


@dataclass(frozen=True, slots=True)
class Harvest:
    """Extract resource from a source."""

    target: ObjectId[Source]

    def __post_init__(self) -> None:
        _require_object_id(self, self.target)


TaskLock = Charge | Upgrade | Harvest

TASK_LOCK_TYPES: tuple[type, ...] = (Charge, Upgrade, Harvest)


def is_task_lock(value: object) -> bool:
    """Check whether a value is one of the TaskLock variants."""
    return isinstance(value, TASK_LOCK_TYPES)
