"""Cycle driver: one tick of the bot.

Usage:
    bot = Bot(BotSettings(max_creeps=4))
    while True:
        report = bot.tick(host)

Or, with explicitly owned state:
    registry = TargetRegistry()
    report = run_cycle(host, registry, NameGenerator(), BotSettings())
"""

from __future__ import annotations

import logging

from creeptick.config import BotSettings
from creeptick.core.identity import NameGenerator, ObjectId, get_generator
from creeptick.core.task import TaskLock
from creeptick.cycle.models import CycleReport
from creeptick.host.models import ResourceType, ReturnCode
from creeptick.host.protocol import Creep, Host
from creeptick.registry import TargetRegistry
from creeptick.tasks import StepOutcome, step

logger = logging.getLogger(__name__)


def run_cycle(
    host: Host,
    registry: TargetRegistry,
    generator: NameGenerator,
    settings: BotSettings,
) -> CycleReport:
    """Run every creep once, then make the spawn decision.

    Args:
        host: World snapshot for this tick.
        registry: Lock store, mutated in place. Only this call may touch it during the tick.
        generator: Source of new creep names.
        settings: Bot configuration.

    Returns:
        Report of everything the tick did.
    """
    report = CycleReport(tick=host.time, cpu_start=host.cpu_used())
    logger.debug("loop starting! CPU: %.2f", report.cpu_start)

    logger.debug("running creeps")
    run_creeps(host, registry, report, settings.resource)

    logger.debug("running spawns")
    run_spawns(host, generator, report, settings)

    report.cpu_end = host.cpu_used()
    logger.info("done! cpu: %.2f", report.cpu_end)
    return report


def run_creeps(
    host: Host,
    registry: TargetRegistry,
    report: CycleReport,
    resource: ResourceType = ResourceType.ENERGY,
) -> None:
    """Step every creep in host order and apply the outcomes to the registry."""
    for creep in host.creeps():
        if creep.spawning:
            report.creeps_skipped += 1
            continue
        logger.debug("running creep %s", creep.name)
        lock = registry.get(creep.id)
        outcome = step(creep, lock, host, resource)
        _apply_outcome(registry, creep, lock, outcome, report)


def _apply_outcome(
    registry: TargetRegistry,
    creep: Creep,
    previous: TaskLock | None,
    outcome: StepOutcome,
    report: CycleReport,
) -> None:
    if outcome.skipped:
        report.creeps_skipped += 1
        return

    report.creeps_run += 1
    creep_id: ObjectId[Creep] = creep.id

    if outcome.lock is None:
        if previous is not None:
            registry.release(creep_id)
    elif outcome.lock != previous:
        registry.assign(creep_id, outcome.lock)

    if outcome.cleared is not None:
        report.released[creep_id] = outcome.cleared
    if outcome.assigned and outcome.lock is not None:
        report.assigned[creep_id] = outcome.lock
    if outcome.action is not None:
        report.count_action(outcome.action)


def run_spawns(
    host: Host,
    generator: NameGenerator,
    report: CycleReport,
    settings: BotSettings,
) -> None:
    """Ask idle spawns for new creeps while under the creep cap.

    Requests accepted earlier in the same tick count toward the cap, so several
    idle spawns cannot overshoot it together.
    """
    creep_count = sum(1 for _ in host.creeps())

    for spawn in host.spawns():
        if spawn.spawning:
            continue

        if creep_count + len(report.spawn_requests) >= settings.max_creeps:
            continue

        logger.debug("running spawn %s", spawn.name)

        room = spawn.room
        if room is None or room.energy_available < settings.body_cost:
            continue

        name = generator.next_name(settings.name_prefix)
        code = ReturnCode(spawn.spawn_creep(settings.body, name))
        if code != ReturnCode.OK:
            logger.warning("couldn't spawn %s: %s", name, code.name)
            report.spawn_failures.append((name, code))
        else:
            report.spawn_requests.append(name)


class Bot:
    """Owns the state that must survive between ticks and runs the loop.

    Args:
        settings: Bot configuration. Defaults to BotSettings() from the environment.
        registry: Lock store. Defaults to a fresh, empty TargetRegistry.
        generator: Name generator. Defaults to the process-wide generator.
    """

    def __init__(
        self,
        settings: BotSettings | None = None,
        registry: TargetRegistry | None = None,
        generator: NameGenerator | None = None,
    ):
        self.settings = settings or BotSettings()
        self.registry = registry if registry is not None else TargetRegistry()
        self._generator = generator or get_generator()

    def tick(self, host: Host) -> CycleReport:
        """Run one cycle against `host`."""
        return run_cycle(host, self.registry, self._generator, self.settings)
