"""Data models for cycle reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from creeptick.core.identity import ObjectId
from creeptick.core.task import TaskLock
from creeptick.host.models import ReturnCode
from creeptick.tasks.models import Action, ClearReason


@dataclass(slots=True)
class CycleReport:
    """Record of what one tick of the bot did.

    Attributes:
        tick: Host tick number.
        creeps_run: Creeps that went through the executor.
        creeps_skipped: Creeps skipped because they were still spawning.
        assigned: Creep id -> lock produced by task discovery this tick.
        released: Creep id -> reason its previous lock was dropped.
        actions: Count of action primitives invoked, by kind.
        spawn_requests: Names of creeps whose creation the host accepted.
        spawn_failures: (name, code) for creation requests the host refused.
        cpu_start: Host CPU reading when the tick began.
        cpu_end: Host CPU reading when the tick finished.

    Example:
        report = bot.tick(host)
        print(report.to_dict())
    """

    tick: int
    creeps_run: int = 0
    creeps_skipped: int = 0
    assigned: dict[ObjectId[Any], TaskLock] = field(default_factory=dict)
    released: dict[ObjectId[Any], ClearReason] = field(default_factory=dict)
    actions: dict[Action, int] = field(default_factory=dict)
    spawn_requests: list[str] = field(default_factory=list)
    spawn_failures: list[tuple[str, ReturnCode]] = field(default_factory=list)
    cpu_start: float = 0.0
    cpu_end: float = 0.0

    def count_action(self, action: Action) -> None:
        self.actions[action] = self.actions.get(action, 0) + 1

    @property
    def total_actions(self) -> int:
        return sum(self.actions.values())

    def is_empty(self) -> bool:
        """Check whether the tick changed nothing.

        Returns:
            True if no creep was run and no lock, action or spawn request was recorded.
        """
        return (
            self.creeps_run == 0
            and not self.assigned
            and not self.released
            and not self.actions
            and not self.spawn_requests
            and not self.spawn_failures
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "tick": self.tick,
            "creeps_run": self.creeps_run,
            "creeps_skipped": self.creeps_skipped,
            "assigned": {
                str(creep_id): {"task": type(lock).__name__, "target": str(lock.target)}
                for creep_id, lock in self.assigned.items()
            },
            "released": {str(creep_id): reason.value for creep_id, reason in self.released.items()},
            "actions": {action.value: count for action, count in self.actions.items()},
            "spawn_requests": list(self.spawn_requests),
            "spawn_failures": [[name, code.name] for name, code in self.spawn_failures],
            "cpu_start": self.cpu_start,
            "cpu_end": self.cpu_end,
        }
