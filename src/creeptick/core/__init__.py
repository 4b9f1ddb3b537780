"""Core primitives: stateless value types shared by every layer.

Architecture Note:
    core/ holds identifiers, task locks and type aliases with no runtime state
    beyond the process-wide name generator. Stateful services live in
    registry/, tasks/ and cycle/; the world itself lives behind host/.
"""

from creeptick.core.identity import (
    EntropyError,
    FixedSeed,
    NameGenerator,
    ObjectId,
    SeedSource,
    SystemSeedSource,
    get_generator,
)
from creeptick.core.task import Charge, Harvest, TaskLock, Upgrade, is_task_lock
from creeptick.core.types import Handle

__all__ = [
    # Types
    "Handle",
    # Identity
    "ObjectId",
    "NameGenerator",
    "SeedSource",
    "SystemSeedSource",
    "FixedSeed",
    "EntropyError",
    "get_generator",
    # Tasks
    "TaskLock",
    "Charge",
    "Upgrade",
    "Harvest",
    "is_task_lock",
]
