"""Host protocol: what the decision core needs from the game world.

The host layer abstracts the simulated world, enabling:
- The live game, through a thin binding (not part of this package)
- LocalHost, an in-memory world for tests and demos

Every object returned by a host is a handle valid for the current tick only.
Only `ObjectId` values may be kept from one tick to the next.

Usage:
    host = LocalHost()
    for creep in host.creeps():
        source = host.resolve(source_id)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, TypeVar

from creeptick.core.identity import ObjectId
from creeptick.core.types import Handle
from creeptick.host.models import FindKind, Part, Position, ResourceType, ReturnCode, StructureType

T = TypeVar("T")


class Store(Protocol):
    """Cargo store of a creep or structure."""

    def get_used_capacity(self, resource: ResourceType | None = None) -> int:
        """Units held of `resource` (all resources when None)."""
        ...

    def get_free_capacity(self, resource: ResourceType | None = None) -> int:
        """Units of `resource` that still fit."""
        ...


class Room(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def energy_available(self) -> int:
        """Energy currently available for spawning in this room."""
        ...

    def find(self, kind: FindKind) -> Sequence[Any]:
        """Enumerate room objects of a kind, in the host's natural order."""
        ...


class Source(Protocol):
    @property
    def id(self) -> ObjectId[Source]: ...

    @property
    def pos(self) -> Position: ...

    @property
    def energy(self) -> int: ...


class Controller(Protocol):
    @property
    def id(self) -> ObjectId[Controller]: ...

    @property
    def pos(self) -> Position: ...

    @property
    def structure_type(self) -> StructureType: ...


class Spawn(Protocol):
    @property
    def id(self) -> ObjectId[Spawn]: ...

    @property
    def name(self) -> str: ...

    @property
    def pos(self) -> Position: ...

    @property
    def structure_type(self) -> StructureType: ...

    @property
    def spawning(self) -> bool:
        """True while the spawn is busy producing a creep."""
        ...

    @property
    def store(self) -> Store: ...

    @property
    def room(self) -> Room | None: ...

    def spawn_creep(self, body: Sequence[Part], name: str) -> ReturnCode:
        """Request a new creep. The creep appears, still spawning, on a later tick."""
        ...


class Creep(Protocol):
    @property
    def id(self) -> ObjectId[Creep]: ...

    @property
    def name(self) -> str: ...

    @property
    def spawning(self) -> bool:
        """True while the creep is not yet materialized in the world."""
        ...

    @property
    def pos(self) -> Position: ...

    @property
    def store(self) -> Store: ...

    @property
    def room(self) -> Room | None: ...

    def move_to(self, target: Handle[Any]) -> ReturnCode: ...

    def harvest(self, source: Handle[Source]) -> ReturnCode: ...

    def upgrade_controller(self, controller: Handle[Controller]) -> ReturnCode: ...

    def transfer(
        self, target: Handle[Spawn], resource: ResourceType, amount: int | None = None
    ) -> ReturnCode: ...


class Host(Protocol):
    """World snapshot for one tick plus the id resolver."""

    @property
    def time(self) -> int:
        """Current tick number."""
        ...

    def creeps(self) -> Iterable[Creep]:
        """All controlled creeps, including ones still spawning."""
        ...

    def spawns(self) -> Iterable[Spawn]:
        """All controlled spawns."""
        ...

    def resolve(self, object_id: ObjectId[T]) -> Handle[T] | None:
        """Look up a live handle for `object_id`. None if the object is gone or not visible."""
        ...

    def cpu_used(self) -> float:
        """CPU time spent so far this tick, in milliseconds."""
        ...
