"""Task executor: validate a creep's lock and make one tick of progress.

Each lock variant has a cargo precondition and a step function:

    Upgrade  holds resource      resolve -> upgrade, NOT_IN_RANGE -> move
    Charge   holds resource      resolve -> transfer, NOT_IN_RANGE -> move
    Harvest  has free capacity   resolve -> adjacent ? harvest : move, NOT_IN_RANGE -> move

A false precondition or an unresolvable target drops the lock and the creep
is re-evaluated through task discovery in the same step; no action is taken
for the new lock until the next tick. A failed action drops the lock and
leaves the creep unassigned until the next tick.
"""

from __future__ import annotations

import logging
from typing import Any

from creeptick.core.task import Charge, Harvest, TaskLock, Upgrade
from creeptick.host.models import ResourceType, ReturnCode
from creeptick.host.protocol import Creep, Host
from creeptick.tasks.discovery import discover
from creeptick.tasks.models import Action, ClearReason, StepOutcome

logger = logging.getLogger(__name__)


def precondition(lock: TaskLock, creep: Creep, resource: ResourceType) -> bool:
    """Check whether the creep's cargo still allows the locked task.

    Args:
        lock: Lock to check.
        creep: Creep holding the lock.
        resource: Resource being moved.

    Returns:
        True if the task is still meaningful, False if it is complete or obsolete.
    """
    match lock:
        case Upgrade() | Charge():
            return creep.store.get_used_capacity(resource) > 0
        case Harvest():
            return creep.store.get_free_capacity(resource) > 0


def step(
    creep: Creep,
    lock: TaskLock | None,
    host: Host,
    resource: ResourceType = ResourceType.ENERGY,
) -> StepOutcome:
    """Run one creep for one tick.

    Args:
        creep: Creep handle for this tick.
        lock: Lock currently held by the creep, or None.
        host: Host used to resolve the lock target.
        resource: Resource harvested, carried and delivered.

    Returns:
        StepOutcome describing the action taken and the lock to keep.
    """
    if creep.spawning:
        return StepOutcome.skip()

    if lock is None:
        return _reassign(creep, resource, None)

    if not precondition(lock, creep, resource):
        logger.debug("%s: %s no longer applies, dropping", creep.name, lock)
        return _reassign(creep, resource, ClearReason.PRECONDITION_FAILED)

    match lock:
        case Upgrade():
            return _step_upgrade(creep, lock, host, resource)
        case Harvest():
            return _step_harvest(creep, lock, host, resource)
        case Charge():
            return _step_charge(creep, lock, host, resource)


def _step_upgrade(
    creep: Creep, lock: Upgrade, host: Host, resource: ResourceType
) -> StepOutcome:
    controller = host.resolve(lock.target)
    if controller is None:
        return _target_gone(creep, lock, resource)

    code = ReturnCode(creep.upgrade_controller(controller))
    if code == ReturnCode.NOT_IN_RANGE:
        return _move(creep, lock, controller)
    if code != ReturnCode.OK:
        return _failed(creep, lock, Action.UPGRADE, code)
    return StepOutcome.keep(lock, Action.UPGRADE, code)


def _step_harvest(
    creep: Creep, lock: Harvest, host: Host, resource: ResourceType
) -> StepOutcome:
    source = host.resolve(lock.target)
    if source is None:
        return _target_gone(creep, lock, resource)

    if not creep.pos.is_near_to(source.pos):
        return _move(creep, lock, source)

    code = ReturnCode(creep.harvest(source))
    if code == ReturnCode.NOT_IN_RANGE:
        return _move(creep, lock, source)
    if code != ReturnCode.OK:
        return _failed(creep, lock, Action.HARVEST, code)
    return StepOutcome.keep(lock, Action.HARVEST, code)


def _step_charge(creep: Creep, lock: Charge, host: Host, resource: ResourceType) -> StepOutcome:
    target = host.resolve(lock.target)
    if target is None:
        return _target_gone(creep, lock, resource)

    code = ReturnCode(creep.transfer(target, resource))
    if code == ReturnCode.NOT_IN_RANGE:
        return _move(creep, lock, target)
    if code != ReturnCode.OK:
        return _failed(creep, lock, Action.TRANSFER, code)
    return StepOutcome.keep(lock, Action.TRANSFER, code)


def _move(creep: Creep, lock: TaskLock, target: Any) -> StepOutcome:
    code = ReturnCode(creep.move_to(target))
    if code != ReturnCode.OK:
        # Movement trouble is the host's business; the lock stays.
        logger.debug("%s: move toward %s returned %s", creep.name, lock.target, code.name)
    return StepOutcome.keep(lock, Action.MOVE, code)


def _failed(creep: Creep, lock: TaskLock, action: Action, code: ReturnCode) -> StepOutcome:
    logger.warning(
        "%s: couldn't %s for %s: %s", creep.name, action.value, type(lock).__name__, code.name
    )
    return StepOutcome(action=action, code=code, cleared=ClearReason.ACTION_FAILED)


def _target_gone(creep: Creep, lock: TaskLock, resource: ResourceType) -> StepOutcome:
    logger.debug("%s: target %s of %s is gone", creep.name, lock.target, type(lock).__name__)
    return _reassign(creep, resource, ClearReason.TARGET_INVALID)


def _reassign(creep: Creep, resource: ResourceType, cleared: ClearReason | None) -> StepOutcome:
    new_lock = discover(creep, resource)
    if new_lock is not None:
        logger.debug("%s: assigned %s", creep.name, new_lock)
    return StepOutcome(lock=new_lock, cleared=cleared, assigned=new_lock is not None)
