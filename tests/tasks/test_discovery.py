"""Tests for fallback task discovery.

Critical Invariants:
- Loaded creeps prefer an under-capacity spawn over the controller
- Ties are broken by enumeration order only
- Same snapshot, same answer
- A loaded creep with nowhere to deliver is an error-level anomaly
"""

import logging

from hypothesis import given
from hypothesis import strategies as st

from creeptick.core.task import Charge, Harvest, Upgrade
from creeptick.host import LocalHost
from creeptick.tasks import discover


def test_empty_creep_harvests_first_active_source(host, room):
    first = host.add_source(room, 5, 5)
    host.add_source(room, 30, 30)
    creep = host.add_creep(room, "Worker", 20, 20)

    assert discover(creep) == Harvest(first.id)


def test_depleted_sources_are_skipped(host, room):
    host.add_source(room, 5, 5, energy=0)
    active = host.add_source(room, 30, 30)
    creep = host.add_creep(room, "Worker", 20, 20)

    assert discover(creep) == Harvest(active.id)


def test_empty_creep_without_sources_idles(host, room, caplog):
    creep = host.add_creep(room, "Worker", 20, 20)

    with caplog.at_level(logging.DEBUG, logger="creeptick"):
        assert discover(creep) is None
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


def test_loaded_creep_prefers_spawn_over_controller(host, room):
    """Scenario: spawn with free capacity and a controller -> Charge, never Upgrade."""
    spawn = host.add_spawn(room, "Spawn1", 25, 25, energy=0)
    host.add_controller(room, 40, 40)
    creep = host.add_creep(room, "Worker", 20, 20, energy=50)

    assert discover(creep) == Charge(spawn.id)


def test_controller_listed_first_still_loses_to_spawn(host, room):
    host.add_controller(room, 40, 40)
    spawn = host.add_spawn(room, "Spawn1", 25, 25, energy=0)
    creep = host.add_creep(room, "Worker", 20, 20, energy=50)

    assert discover(creep) == Charge(spawn.id)


def test_full_spawns_are_passed_over(host, room):
    host.add_spawn(room, "Spawn1", 25, 25)
    second = host.add_spawn(room, "Spawn2", 27, 25, energy=10)
    creep = host.add_creep(room, "Worker", 20, 20, energy=50)

    assert discover(creep) == Charge(second.id)


def test_loaded_creep_upgrades_when_spawns_are_full(host, room):
    host.add_spawn(room, "Spawn1", 25, 25)
    controller = host.add_controller(room, 40, 40)
    creep = host.add_creep(room, "Worker", 20, 20, energy=50)

    assert discover(creep) == Upgrade(controller.id)


def test_loaded_creep_with_no_receiver_and_no_controller_logs_error(host, room, caplog):
    host.add_spawn(room, "Spawn1", 25, 25)
    host.add_source(room, 5, 5)
    creep = host.add_creep(room, "Worker", 20, 20, energy=50)

    with caplog.at_level(logging.ERROR, logger="creeptick"):
        assert discover(creep) is None

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "No controller could be found" in errors[0].getMessage()


def test_loaded_creep_does_not_fall_back_to_harvest(host, room):
    host.add_source(room, 5, 5)
    creep = host.add_creep(room, "Worker", 20, 20, energy=10)

    assert discover(creep) is None


@given(
    spawn_energies=st.lists(st.integers(min_value=0, max_value=300), max_size=4),
    has_controller=st.booleans(),
    source_energies=st.lists(st.integers(min_value=0, max_value=3000), max_size=4),
    creep_energy=st.integers(min_value=0, max_value=50),
)
def test_discovery_is_deterministic(spawn_energies, has_controller, source_energies, creep_energy):
    """PROPERTY: repeated calls on the same snapshot return the same lock."""
    host = LocalHost()
    room = host.add_room("W1N1")
    for i, energy in enumerate(spawn_energies):
        host.add_spawn(room, f"Spawn{i}", 20 + i, 25, energy=energy)
    if has_controller:
        host.add_controller(room, 40, 40)
    for i, energy in enumerate(source_energies):
        host.add_source(room, 5 + i, 5, energy=energy)
    creep = host.add_creep(room, "Worker", 10, 10, energy=creep_energy)

    first = discover(creep)

    assert all(discover(creep) == first for _ in range(3))


@given(
    spawn_energies=st.lists(st.integers(min_value=0, max_value=300), min_size=1, max_size=4),
    creep_energy=st.integers(min_value=1, max_value=50),
)
def test_first_spawn_with_room_wins(spawn_energies, creep_energy):
    """PROPERTY: Charge targets the first spawn (by order) that is not full."""
    host = LocalHost()
    room = host.add_room("W1N1")
    spawns = [
        host.add_spawn(room, f"Spawn{i}", 20 + i, 25, energy=energy)
        for i, energy in enumerate(spawn_energies)
    ]
    controller = host.add_controller(room, 40, 40)
    creep = host.add_creep(room, "Worker", 10, 10, energy=creep_energy)

    open_spawns = [s for s in spawns if s.store.get_free_capacity() > 0]
    expected = Charge(open_spawns[0].id) if open_spawns else Upgrade(controller.id)

    assert discover(creep) == expected
