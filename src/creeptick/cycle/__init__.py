"""Cycle driver and reporting."""

from creeptick.cycle.driver import Bot, run_creeps, run_cycle, run_spawns
from creeptick.cycle.models import CycleReport

__all__ = [
    "Bot",
    "run_cycle",
    "run_creeps",
    "run_spawns",
    "CycleReport",
]
