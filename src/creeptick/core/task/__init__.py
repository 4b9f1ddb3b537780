"""Task lock variants."""

from creeptick.core.task.models import (
    TASK_LOCK_TYPES,
    Charge,
    Harvest,
    TaskLock,
    Upgrade,
    is_task_lock,
)

__all__ = [
    "TaskLock",
    "Charge",
    "Upgrade",
    "Harvest",
    "TASK_LOCK_TYPES",
    "is_task_lock",
]
