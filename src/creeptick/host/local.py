"""Local in-memory host implementation.

Dict-based world suitable for tests and demos. Rules are intentionally
simple (one tile per move, no terrain, no decay); this is not a physics model.

Usage:
    host = LocalHost()
    room = host.add_room("W1N1")
    spawn = host.add_spawn(room, "Spawn1", 25, 25)
    source = host.add_source(room, 10, 10)
    creep = host.add_creep(room, "Worker", 20, 20)

    creep.force("harvest", ReturnCode.NOT_OWNER)  # next harvest fails
    host.advance()                                # next tick
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar, cast

from creeptick.core.identity import ObjectId
from creeptick.host.models import (
    FindKind,
    Part,
    Position,
    ResourceType,
    ReturnCode,
    StructureType,
    body_cost,
)

T = TypeVar("T")

CARRY_CAPACITY = 50
HARVEST_POWER = 2
UPGRADE_POWER = 1
UPGRADE_RANGE = 3
SPAWN_ENERGY_CAPACITY = 300
SOURCE_ENERGY_CAPACITY = 3000
SOURCE_REGEN_TIME = 300
SPAWN_TIME_PER_PART = 3
SPAWN_ENERGY_REGEN = 1


@dataclass(frozen=True, slots=True)
class ActionRecord:
    """One action primitive invoked on a LocalHost creep or spawn."""

    tick: int
    actor: str
    action: str
    target: str | None
    code: ReturnCode


class LocalStore:
    """Cargo store with a single shared capacity across resource types.

    Args:
        capacity: Total units the store can hold.
        contents: Initial contents by resource type.
    """

    def __init__(self, capacity: int, contents: dict[ResourceType, int] | None = None):
        self._capacity = capacity
        self._contents: dict[ResourceType, int] = dict(contents or {})

    def get_used_capacity(self, resource: ResourceType | None = None) -> int:
        if resource is None:
            return sum(self._contents.values())
        return self._contents.get(resource, 0)

    def get_free_capacity(self, resource: ResourceType | None = None) -> int:
        return max(self._capacity - self.get_used_capacity(), 0)

    def add(self, resource: ResourceType, amount: int) -> int:
        """Add up to `amount`, returning what actually fit."""
        added = min(amount, self.get_free_capacity(resource))
        if added > 0:
            self._contents[resource] = self._contents.get(resource, 0) + added
        return added

    def remove(self, resource: ResourceType, amount: int) -> int:
        """Remove up to `amount`, returning what was actually taken."""
        taken = min(amount, self.get_used_capacity(resource))
        if taken > 0:
            self._contents[resource] -= taken
        return taken


class _LocalObject:
    def __init__(self, host: LocalHost, object_id: str, pos: Position):
        self._host = host
        self._id = object_id
        self._pos = pos

    @property
    def id(self) -> ObjectId[Any]:
        return ObjectId(self._id)

    @property
    def pos(self) -> Position:
        return self._pos

    @property
    def room(self) -> LocalRoom | None:
        return self._host.rooms.get(self._pos.room_name)


class LocalSource(_LocalObject):
    def __init__(self, host: LocalHost, object_id: str, pos: Position, energy: int):
        super().__init__(host, object_id, pos)
        self.energy = energy
        self.energy_capacity = SOURCE_ENERGY_CAPACITY


class LocalController(_LocalObject):
    structure_type = StructureType.CONTROLLER

    def __init__(self, host: LocalHost, object_id: str, pos: Position):
        super().__init__(host, object_id, pos)
        self.progress = 0


class LocalSpawn(_LocalObject):
    structure_type = StructureType.SPAWN

    def __init__(self, host: LocalHost, object_id: str, name: str, pos: Position, energy: int):
        super().__init__(host, object_id, pos)
        self.name = name
        self.store = LocalStore(SPAWN_ENERGY_CAPACITY, {ResourceType.ENERGY: energy})
        self._in_progress: tuple[LocalCreep, int] | None = None

    @property
    def spawning(self) -> bool:
        return self._in_progress is not None

    def spawn_creep(self, body: Sequence[Part], name: str) -> ReturnCode:
        """Start producing a creep, debiting room energy spawn by spawn."""
        code = self._check_spawn(body, name)
        if code == ReturnCode.OK:
            room = cast(LocalRoom, self.room)
            remaining = body_cost(body)
            for spawn in room.find(FindKind.MY_SPAWNS):
                remaining -= spawn.store.remove(ResourceType.ENERGY, remaining)
            creep = self._host._create_creep(name, self.pos, tuple(body), spawning=True)
            self._in_progress = (creep, SPAWN_TIME_PER_PART * len(body))
        self._host._record(self.name, "spawn_creep", name, code)
        return code

    def _check_spawn(self, body: Sequence[Part], name: str) -> ReturnCode:
        if self.spawning:
            return ReturnCode.BUSY
        if not body:
            return ReturnCode.INVALID_ARGS
        if self._host._creeps.get(name) is not None:
            return ReturnCode.NAME_EXISTS
        room = self.room
        if room is None or room.energy_available < body_cost(body):
            return ReturnCode.NOT_ENOUGH_RESOURCES
        return ReturnCode.OK

    def _advance(self) -> None:
        if self._in_progress is None:
            return
        creep, remaining = self._in_progress
        remaining -= 1
        if remaining <= 0:
            creep._spawning = False
            self._in_progress = None
        else:
            self._in_progress = (creep, remaining)


class LocalCreep(_LocalObject):
    def __init__(
        self,
        host: LocalHost,
        object_id: str,
        name: str,
        pos: Position,
        body: tuple[Part, ...],
        spawning: bool,
    ):
        super().__init__(host, object_id, pos)
        self.name = name
        self.body = body
        self.store = LocalStore(CARRY_CAPACITY * body.count(Part.CARRY))
        self._spawning = spawning
        self._forced: dict[str, ReturnCode] = {}

    @property
    def spawning(self) -> bool:
        return self._spawning

    def force(self, action: str, code: ReturnCode) -> None:
        """Make every later call of `action` return `code` without side effects.

        Args:
            action: One of "move_to", "harvest", "upgrade_controller", "transfer".
            code: Code to return.
        """
        self._forced[action] = code

    def unforce(self, action: str) -> None:
        self._forced.pop(action, None)

    def move_to(self, target: Any) -> ReturnCode:
        code = self._forced.get("move_to")
        if code is None:
            code = self._move_to(target)
        self._host._record(self.name, "move_to", _target_id(target), code)
        return code

    def harvest(self, source: LocalSource) -> ReturnCode:
        code = self._forced.get("harvest")
        if code is None:
            code = self._harvest(source)
        self._host._record(self.name, "harvest", _target_id(source), code)
        return code

    def upgrade_controller(self, controller: LocalController) -> ReturnCode:
        code = self._forced.get("upgrade_controller")
        if code is None:
            code = self._upgrade(controller)
        self._host._record(self.name, "upgrade_controller", _target_id(controller), code)
        return code

    def transfer(
        self, target: LocalSpawn, resource: ResourceType, amount: int | None = None
    ) -> ReturnCode:
        code = self._forced.get("transfer")
        if code is None:
            code = self._transfer(target, resource, amount)
        self._host._record(self.name, "transfer", _target_id(target), code)
        return code

    def _move_to(self, target: Any) -> ReturnCode:
        if self._spawning:
            return ReturnCode.BUSY
        if Part.MOVE not in self.body:
            return ReturnCode.NO_BODYPART
        if target.pos.room_name != self._pos.room_name:
            return ReturnCode.NO_PATH
        self._pos = self._pos.step_toward(target.pos)
        return ReturnCode.OK

    def _harvest(self, source: LocalSource) -> ReturnCode:
        if self._spawning:
            return ReturnCode.BUSY
        work = self.body.count(Part.WORK)
        if work == 0:
            return ReturnCode.NO_BODYPART
        if not self._pos.is_near_to(source.pos):
            return ReturnCode.NOT_IN_RANGE
        if source.energy <= 0:
            return ReturnCode.NOT_ENOUGH_RESOURCES
        mined = min(work * HARVEST_POWER, source.energy)
        source.energy -= mined
        self.store.add(ResourceType.ENERGY, mined)
        return ReturnCode.OK

    def _upgrade(self, controller: LocalController) -> ReturnCode:
        if self._spawning:
            return ReturnCode.BUSY
        work = self.body.count(Part.WORK)
        if work == 0:
            return ReturnCode.NO_BODYPART
        if self.store.get_used_capacity(ResourceType.ENERGY) == 0:
            return ReturnCode.NOT_ENOUGH_RESOURCES
        if not self._pos.in_range_to(controller.pos, UPGRADE_RANGE):
            return ReturnCode.NOT_IN_RANGE
        controller.progress += self.store.remove(ResourceType.ENERGY, work * UPGRADE_POWER)
        return ReturnCode.OK

    def _transfer(
        self, target: LocalSpawn, resource: ResourceType, amount: int | None
    ) -> ReturnCode:
        if self._spawning:
            return ReturnCode.BUSY
        held = self.store.get_used_capacity(resource)
        if held == 0 or (amount is not None and amount > held):
            return ReturnCode.NOT_ENOUGH_RESOURCES
        if not self._pos.is_near_to(target.pos):
            return ReturnCode.NOT_IN_RANGE
        if target.store.get_free_capacity(resource) == 0:
            return ReturnCode.FULL
        moved = target.store.add(resource, held if amount is None else amount)
        self.store.remove(resource, moved)
        return ReturnCode.OK


class LocalRoom:
    def __init__(self, host: LocalHost, name: str):
        self._host = host
        self.name = name
        self._structures: list[LocalSpawn | LocalController] = []
        self._sources: list[LocalSource] = []

    @property
    def controller(self) -> LocalController | None:
        for structure in self._structures:
            if isinstance(structure, LocalController):
                return structure
        return None

    @property
    def energy_available(self) -> int:
        return sum(
            spawn.store.get_used_capacity(ResourceType.ENERGY)
            for spawn in self.find(FindKind.MY_SPAWNS)
        )

    def find(self, kind: FindKind) -> list[Any]:
        if kind == FindKind.STRUCTURES:
            return list(self._structures)
        if kind == FindKind.MY_SPAWNS:
            return [s for s in self._structures if isinstance(s, LocalSpawn)]
        if kind == FindKind.SOURCES:
            return list(self._sources)
        if kind == FindKind.SOURCES_ACTIVE:
            return [s for s in self._sources if s.energy > 0]
        if kind == FindKind.MY_CREEPS:
            return [c for c in self._host._creeps.values() if c.pos.room_name == self.name]
        raise ValueError(f"Unknown find kind: {kind}")


class LocalHost:
    """In-memory world implementing the Host protocol.

    Objects are kept in insertion order, which is the enumeration order seen
    by `creeps()`, `spawns()` and `Room.find()`. Every action primitive call is
    appended to `action_log`.
    """

    def __init__(self) -> None:
        self.rooms: dict[str, LocalRoom] = {}
        self.action_log: list[ActionRecord] = []
        self._objects: dict[str, _LocalObject] = {}
        self._creeps: dict[str, LocalCreep] = {}
        self._spawns: dict[str, LocalSpawn] = {}
        self._ids: Iterator[int] = itertools.count(1)
        self._time = 0
        self._tick_started = time.perf_counter()

    @property
    def time(self) -> int:
        return self._time

    # Host protocol

    def creeps(self) -> list[LocalCreep]:
        return list(self._creeps.values())

    def spawns(self) -> list[LocalSpawn]:
        return list(self._spawns.values())

    def resolve(self, object_id: ObjectId[T]) -> T | None:
        return cast("T | None", self._objects.get(object_id.value))

    def cpu_used(self) -> float:
        return (time.perf_counter() - self._tick_started) * 1000.0

    # World construction

    def add_room(self, name: str) -> LocalRoom:
        room = LocalRoom(self, name)
        self.rooms[name] = room
        return room

    def add_spawn(
        self, room: LocalRoom, name: str, x: int, y: int, energy: int = SPAWN_ENERGY_CAPACITY
    ) -> LocalSpawn:
        spawn = LocalSpawn(self, self._next_id(), name, Position(x, y, room.name), energy)
        self._objects[spawn._id] = spawn
        self._spawns[name] = spawn
        room._structures.append(spawn)
        return spawn

    def add_controller(self, room: LocalRoom, x: int, y: int) -> LocalController:
        controller = LocalController(self, self._next_id(), Position(x, y, room.name))
        self._objects[controller._id] = controller
        room._structures.append(controller)
        return controller

    def add_source(
        self, room: LocalRoom, x: int, y: int, energy: int = SOURCE_ENERGY_CAPACITY
    ) -> LocalSource:
        source = LocalSource(self, self._next_id(), Position(x, y, room.name), energy)
        self._objects[source._id] = source
        room._sources.append(source)
        return source

    def add_creep(
        self,
        room: LocalRoom,
        name: str,
        x: int,
        y: int,
        body: tuple[Part, ...] = (Part.MOVE, Part.MOVE, Part.CARRY, Part.WORK),
        energy: int = 0,
        spawning: bool = False,
    ) -> LocalCreep:
        """Place a creep directly, bypassing spawns.

        Raises:
            ValueError: If a creep with this name already exists.
        """
        creep = self._create_creep(name, Position(x, y, room.name), body, spawning)
        creep.store.add(ResourceType.ENERGY, energy)
        return creep

    def destroy(self, object_id: ObjectId[Any]) -> None:
        """Remove an object from the world. Later resolves of its id return None."""
        obj = self._objects.pop(object_id.value, None)
        if obj is None:
            return
        if isinstance(obj, LocalCreep):
            del self._creeps[obj.name]
        elif isinstance(obj, LocalSpawn):
            del self._spawns[obj.name]
        for room in self.rooms.values():
            room._structures = [s for s in room._structures if s is not obj]
            room._sources = [s for s in room._sources if s is not obj]

    def advance(self) -> None:
        """Move to the next tick: progress spawning, regenerate spawns and sources."""
        self._time += 1
        for spawn in self._spawns.values():
            spawn._advance()
            room = spawn.room
            if room is not None and room.energy_available < SPAWN_ENERGY_CAPACITY:
                spawn.store.add(ResourceType.ENERGY, SPAWN_ENERGY_REGEN)
        if self._time % SOURCE_REGEN_TIME == 0:
            for room in self.rooms.values():
                for source in room._sources:
                    source.energy = source.energy_capacity
        self._tick_started = time.perf_counter()

    def actions_by(self, actor: str) -> list[ActionRecord]:
        """Action records for one creep or spawn name, oldest first."""
        return [record for record in self.action_log if record.actor == actor]

    # Internals

    def _next_id(self) -> str:
        return f"{next(self._ids):024x}"

    def _create_creep(
        self, name: str, pos: Position, body: tuple[Part, ...], spawning: bool
    ) -> LocalCreep:
        if name in self._creeps:
            raise ValueError(f"Creep name already in use: {name}")
        creep = LocalCreep(self, self._next_id(), name, pos, body, spawning)
        self._objects[creep._id] = creep
        self._creeps[name] = creep
        return creep

    def _record(self, actor: str, action: str, target: str | None, code: ReturnCode) -> None:
        self.action_log.append(ActionRecord(self._time, actor, action, target, code))


def _target_id(target: Any) -> str | None:
    object_id = getattr(target, "id", None)
    return None if object_id is None else str(object_id)
