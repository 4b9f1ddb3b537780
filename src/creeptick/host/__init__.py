"""Host layer: the collaborator interface the decision core drives."""

from creeptick.host.local import ActionRecord, LocalHost, LocalStore
from creeptick.host.models import (
    FindKind,
    Part,
    Position,
    ResourceType,
    ReturnCode,
    StructureType,
    body_cost,
)
from creeptick.host.protocol import Controller, Creep, Host, Room, Source, Spawn, Store

__all__ = [
    # Protocols
    "Host",
    "Room",
    "Creep",
    "Spawn",
    "Source",
    "Controller",
    "Store",
    # Vocabulary
    "ReturnCode",
    "ResourceType",
    "Part",
    "StructureType",
    "FindKind",
    "Position",
    "body_cost",
    # Local implementation
    "LocalHost",
    "LocalStore",
    "ActionRecord",
]
