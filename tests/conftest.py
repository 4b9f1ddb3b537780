"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from creeptick import BotSettings, FixedSeed, LocalHost, NameGenerator, TargetRegistry


@pytest.fixture
def host():
    """Fresh LocalHost with one empty room named W1N1."""
    host = LocalHost()
    host.add_room("W1N1")
    return host


@pytest.fixture
def room(host):
    return host.rooms["W1N1"]


@pytest.fixture
def registry():
    """Fresh, empty TargetRegistry."""
    return TargetRegistry()


@pytest.fixture
def generator():
    """NameGenerator with a fixed seed."""
    return NameGenerator(FixedSeed(1234))


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return BotSettings(_env_file=None)
