"""Identity functionality: stable object ids and creep name generation."""

from creeptick.core.identity.generator import (
    EntropyError,
    FixedSeed,
    NameGenerator,
    SeedSource,
    SystemSeedSource,
    get_generator,
)
from creeptick.core.identity.models import ObjectId

__all__ = [
    "ObjectId",
    "NameGenerator",
    "SeedSource",
    "SystemSeedSource",
    "FixedSeed",
    "EntropyError",
    "get_generator",
]
