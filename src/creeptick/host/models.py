"""Host vocabulary: return codes, resources, body parts, positions.

Numeric values match the ones the game host reports, so codes read from a
live host can be converted with `ReturnCode(raw)`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ReturnCode(IntEnum):
    """Status returned by every host action primitive."""

    OK = 0
    NOT_OWNER = -1
    NO_PATH = -2
    NAME_EXISTS = -3
    BUSY = -4
    NOT_FOUND = -5
    NOT_ENOUGH_RESOURCES = -6
    INVALID_TARGET = -7
    FULL = -8
    NOT_IN_RANGE = -9
    INVALID_ARGS = -10
    TIRED = -11
    NO_BODYPART = -12
    RCL_NOT_ENOUGH = -14
    GCL_NOT_ENOUGH = -15


class ResourceType(str, Enum):
    ENERGY = "energy"
    POWER = "power"


class Part(str, Enum):
    """Creep body part. Each part has a fixed spawn cost in energy."""

    MOVE = "move"
    WORK = "work"
    CARRY = "carry"
    ATTACK = "attack"
    RANGED_ATTACK = "ranged_attack"
    HEAL = "heal"
    CLAIM = "claim"
    TOUGH = "tough"

    @property
    def cost(self) -> int:
        return _PART_COSTS[self]


_PART_COSTS: dict[Part, int] = {
    Part.MOVE: 50,
    Part.WORK: 100,
    Part.CARRY: 50,
    Part.ATTACK: 80,
    Part.RANGED_ATTACK: 150,
    Part.HEAL: 250,
    Part.CLAIM: 600,
    Part.TOUGH: 10,
}


def body_cost(body: tuple[Part, ...] | list[Part]) -> int:
    """Total energy needed to spawn a creep with this body."""
    return sum(part.cost for part in body)


class StructureType(str, Enum):
    SPAWN = "spawn"
    EXTENSION = "extension"
    CONTROLLER = "controller"
    CONTAINER = "container"
    ROAD = "road"


class FindKind(Enum):
    """What `Room.find` should enumerate."""

    STRUCTURES = "structures"
    MY_SPAWNS = "my_spawns"
    SOURCES = "sources"
    SOURCES_ACTIVE = "sources_active"
    MY_CREEPS = "my_creeps"


@dataclass(frozen=True, slots=True)
class Position:
    """Tile position inside a named room."""

    x: int
    y: int
    room_name: str

    def range_to(self, other: Position) -> int | None:
        """Chebyshev distance, or None when the positions are in different rooms."""
        if self.room_name != other.room_name:
            return None
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def in_range_to(self, other: Position, distance: int) -> bool:
        r = self.range_to(other)
        return r is not None and r <= distance

    def is_near_to(self, other: Position) -> bool:
        """True when `other` is on this tile or one of the eight around it."""
        return self.in_range_to(other, 1)

    def step_toward(self, other: Position) -> Position:
        """Position one tile closer to `other` (same room only)."""
        if self.room_name != other.room_name:
            return self
        dx = (other.x > self.x) - (other.x < self.x)
        dy = (other.y > self.y) - (other.y < self.y)
        return Position(self.x + dx, self.y + dy, self.room_name)
