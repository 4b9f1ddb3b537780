"""Unique name generation for newly spawned creeps.

NameGenerator is a stateful service seeded exactly once, at construction.

Usage:
    generator = NameGenerator()                  # seeded from the OS
    generator = NameGenerator(FixedSeed(1234))   # deterministic, for tests
    name = generator.next_name("Role:")          # "Role:6f1c...-..."
"""

from __future__ import annotations

import os
import random
import threading
import uuid
from typing import Protocol

_ID_BYTES = 16


class EntropyError(RuntimeError):
    """Raised when the generator cannot obtain random bytes. Not recoverable."""

    pass


class SeedSource(Protocol):
    """Supplies the one-time seed for a NameGenerator."""

    def seed(self) -> int:
        """Return a seed value."""
        ...


class SystemSeedSource:
    """Seed drawn from the operating system entropy pool."""

    def seed(self) -> int:
        """Read 64 bits from os.urandom.

        Raises:
            EntropyError: If the OS cannot provide random bytes.
        """
        try:
            raw = os.urandom(8)
        except (OSError, NotImplementedError) as e:
            raise EntropyError("Could not read seed from the OS entropy pool") from e
        return int.from_bytes(raw, "little")


class FixedSeed:
    """Constant seed. Makes generated identifiers reproducible."""

    def __init__(self, value: int):
        self._value = value

    def seed(self) -> int:
        return self._value


class NameGenerator:
    """Generates random version-4 UUIDs from a privately seeded PRNG.

    Identifiers only need to be unique among creeps alive in this process, so a
    fresh seed after a restart is harmless.

    Args:
        seed_source: Where the seed comes from. Defaults to SystemSeedSource.

    Raises:
        EntropyError: If the seed source fails.
    """

    def __init__(self, seed_source: SeedSource | None = None):
        source = seed_source or SystemSeedSource()
        self._rng = random.Random(source.seed())

    def next_id(self) -> uuid.UUID:
        """Produce the next identifier.

        Returns:
            A random RFC 4122 version-4 UUID.
        """
        return uuid.UUID(bytes=self._rng.randbytes(_ID_BYTES), version=4)

    def next_name(self, prefix: str = "Role:") -> str:
        """Produce a creep name: prefix followed by a fresh identifier."""
        return f"{prefix}{self.next_id()}"


_generator: NameGenerator | None = None
_generator_lock = threading.Lock()


def get_generator() -> NameGenerator:
    """Access the process-wide generator, seeding it on first use.

    Returns:
        The process-local NameGenerator instance.
    """
    global _generator
    if _generator is None:
        with _generator_lock:
            if _generator is None:
                _generator = NameGenerator()
    return _generator
