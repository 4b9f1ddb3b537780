"""Tests for the target registry.

Critical Invariants:
- At most one lock per creep; assign() replaces wholesale
- Only TaskLock variants keyed by ObjectId can be stored
- Registries are independent (no shared global state)
"""

import pytest

from creeptick.core.identity import ObjectId
from creeptick.core.task import Charge, Harvest, Upgrade
from creeptick.registry import TargetRegistry

CREEP = ObjectId("creep-1")


def test_empty_registry_has_no_locks(registry):
    assert registry.get(CREEP) is None
    assert CREEP not in registry
    assert len(registry) == 0


def test_assign_then_get(registry):
    lock = Harvest(ObjectId("src"))
    registry.assign(CREEP, lock)

    assert registry.get(CREEP) == lock
    assert registry.get(ObjectId("creep-1")) == lock
    assert CREEP in registry


def test_assign_replaces_previous_lock(registry):
    """INVARIANT: one lock per creep."""
    registry.assign(CREEP, Harvest(ObjectId("src")))
    registry.assign(CREEP, Charge(ObjectId("spawn")))

    assert registry.get(CREEP) == Charge(ObjectId("spawn"))
    assert len(registry) == 1


def test_release_reports_whether_lock_existed(registry):
    registry.assign(CREEP, Upgrade(ObjectId("ctrl")))

    assert registry.release(CREEP) is True
    assert registry.release(CREEP) is False
    assert registry.get(CREEP) is None


@pytest.mark.parametrize("bad_lock", [None, "Harvest", ObjectId("src"), {"task": "Harvest"}])
def test_assign_rejects_non_lock_values(registry, bad_lock):
    with pytest.raises(TypeError, match="Expected Charge, Upgrade or Harvest"):
        registry.assign(CREEP, bad_lock)
    assert len(registry) == 0


def test_assign_rejects_non_object_id_keys(registry):
    with pytest.raises(TypeError, match="Expected ObjectId key"):
        registry.assign("creep-1", Harvest(ObjectId("src")))


def test_snapshot_is_a_copy(registry):
    registry.assign(CREEP, Harvest(ObjectId("src")))
    snap = registry.snapshot()
    registry.release(CREEP)

    assert snap == {CREEP: Harvest(ObjectId("src"))}
    assert len(registry) == 0


def test_to_dict_is_json_friendly(registry):
    registry.assign(CREEP, Charge(ObjectId("spawn")))

    assert registry.to_dict() == {"creep-1": {"task": "Charge", "target": "spawn"}}


def test_iteration_and_clear(registry):
    other = ObjectId("creep-2")
    registry.assign(CREEP, Harvest(ObjectId("a")))
    registry.assign(other, Harvest(ObjectId("b")))

    assert set(registry) == {CREEP, other}
    assert dict(registry.items())[other] == Harvest(ObjectId("b"))

    registry.clear()
    assert len(registry) == 0


def test_registries_do_not_share_state():
    first = TargetRegistry()
    second = TargetRegistry()
    first.assign(CREEP, Harvest(ObjectId("src")))

    assert second.get(CREEP) is None
