"""Target registry."""

from creeptick.registry.registry import CreepKey, TargetRegistry

__all__ = [
    "TargetRegistry",
    "CreepKey",
]
