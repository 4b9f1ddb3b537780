"""Task discovery: greedy fallback assignment for unassigned creeps.

Policy, first match wins:
    1. Creep carries resource:
       a. first spawn (room enumeration order) with free capacity -> Charge
       b. the room controller -> Upgrade
       c. nothing -> idle, logged as an error (room has no controller)
    2. Creep is empty: first active source -> Harvest, else idle.

There is no scoring and no balancing between creeps: the same snapshot always
yields the same lock.
"""

from __future__ import annotations

import logging

from creeptick.core.task import Charge, Harvest, TaskLock, Upgrade
from creeptick.host.models import FindKind, ResourceType, StructureType
from creeptick.host.protocol import Creep

logger = logging.getLogger(__name__)


def discover(creep: Creep, resource: ResourceType = ResourceType.ENERGY) -> TaskLock | None:
    """Pick a new task for a creep that holds no lock.

    Args:
        creep: Creep to assign, already materialized.
        resource: Resource the creep carries and delivers.

    Returns:
        The new lock, or None if nothing is assignable this tick.
    """
    room = creep.room
    if room is None:
        logger.warning("creep %s has no visible room, cannot assign a task", creep.name)
        return None

    if creep.store.get_used_capacity(resource) > 0:
        receiver = None
        controller = None
        for structure in room.find(FindKind.STRUCTURES):
            if structure.structure_type == StructureType.SPAWN:
                if receiver is None and structure.store.get_free_capacity(resource) > 0:
                    receiver = structure
            elif structure.structure_type == StructureType.CONTROLLER:
                if controller is None:
                    controller = structure

        if receiver is not None:
            return Charge(receiver.id)
        if controller is not None:
            return Upgrade(controller.id)

        logger.error("No controller could be found in room %s for %s", room.name, creep.name)
        return None

    sources = room.find(FindKind.SOURCES_ACTIVE)
    if sources:
        return Harvest(sources[0].id)

    logger.debug("no active source in room %s for %s", room.name, creep.name)
    return None
