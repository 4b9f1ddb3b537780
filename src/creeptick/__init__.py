"""creeptick: per-tick task assignment and execution for creep-based bots.

Usage:
    from creeptick import Bot, BotSettings, LocalHost

    host = LocalHost()
    room = host.add_room("W1N1")
    host.add_spawn(room, "Spawn1", 25, 25)
    host.add_controller(room, 30, 30)
    host.add_source(room, 10, 10)

    bot = Bot(BotSettings(max_creeps=4))
    for _ in range(100):
        bot.tick(host)
        host.advance()
"""

__version__ = "0.1.0"

# Configuration
from creeptick.config import BotSettings

# Core primitives
from creeptick.core import (
    Charge,
    EntropyError,
    FixedSeed,
    Handle,
    Harvest,
    NameGenerator,
    ObjectId,
    SeedSource,
    SystemSeedSource,
    TaskLock,
    Upgrade,
    get_generator,
)

# Cycle driver
from creeptick.cycle import Bot, CycleReport, run_cycle

# Host interface
from creeptick.host import (
    FindKind,
    Host,
    LocalHost,
    Part,
    Position,
    ResourceType,
    ReturnCode,
    StructureType,
)

# Logging
from creeptick.log import setup_logging

# Registry
from creeptick.registry import TargetRegistry

# Tasks
from creeptick.tasks import Action, ClearReason, StepOutcome, discover, step

__all__ = [
    # Version
    "__version__",
    # Core
    "ObjectId",
    "Handle",
    "TaskLock",
    "Charge",
    "Upgrade",
    "Harvest",
    "NameGenerator",
    "SeedSource",
    "SystemSeedSource",
    "FixedSeed",
    "EntropyError",
    "get_generator",
    # Host
    "Host",
    "LocalHost",
    "ReturnCode",
    "ResourceType",
    "Part",
    "StructureType",
    "FindKind",
    "Position",
    # Registry
    "TargetRegistry",
    # Tasks
    "step",
    "discover",
    "StepOutcome",
    "Action",
    "ClearReason",
    # Cycle
    "Bot",
    "run_cycle",
    "CycleReport",
    # Config
    "BotSettings",
    # Logging
    "setup_logging",
]
