"""Stable object identifiers.

Usage:
    source_id = ObjectId[Source]("5bbcaa9099")
    source = host.resolve(source_id)  # None if the source is gone
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ObjectId[T]:
    """Tick-independent reference to a host object.

    Host objects go stale at the end of the tick they were fetched in; an
    ObjectId does not. The type parameter records what kind of object the id
    names and is used for static checking only.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"ObjectId requires a non-empty string, got {self.value!r}")

    def __str__(self) -> str:
        return self.value
