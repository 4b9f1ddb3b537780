"""Step outcome models.

The executor never touches the registry itself; it reports what the next
lock state should be and the cycle driver applies it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from creeptick.core.task import TaskLock
from creeptick.host.models import ReturnCode


class Action(str, Enum):
    """Creep action primitive invoked during a step."""

    MOVE = "move_to"
    HARVEST = "harvest"
    UPGRADE = "upgrade_controller"
    TRANSFER = "transfer"


class ClearReason(str, Enum):
    """Why a lock was dropped."""

    TARGET_INVALID = "target_invalid"
    """The target id no longer resolves to a live object."""

    ACTION_FAILED = "action_failed"
    """The action returned something other than OK or NOT_IN_RANGE."""

    PRECONDITION_FAILED = "precondition_failed"
    """The creep's cargo no longer allows the task (empty for Charge/Upgrade, full for Harvest)."""


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """Result of running one creep for one tick.

    Attributes:
        lock: Lock the creep should hold after this tick, None for unassigned.
        action: Action invoked this tick, if any. At most one per step.
        code: Return code of that action.
        cleared: Reason the previous lock was dropped, if it was.
        assigned: True when task discovery produced `lock` during this step.
        skipped: True when the creep was still spawning and nothing was read or written.
    """

    lock: TaskLock | None = None
    action: Action | None = None
    code: ReturnCode | None = None
    cleared: ClearReason | None = None
    assigned: bool = False
    skipped: bool = False

    @classmethod
    def skip(cls) -> StepOutcome:
        return cls(skipped=True)

    @classmethod
    def keep(cls, lock: TaskLock, action: Action, code: ReturnCode) -> StepOutcome:
        return cls(lock=lock, action=action, code=code)
