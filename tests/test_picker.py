import pytest

from roguegen.picker import PresetPicker, RandRange, SpawnList
from roguegen.rng import ReRandom

def test_preset_makes_no_draw():
    r, fresh = ReRandom(4), ReRandom(4)
    p = PresetPicker("boss")
    assert p.pick(r) == "boss"
    assert r.state == fresh.state

def test_spawn_list_follows_the_roll():
    spawns = SpawnList([("a", 1), ("b", 0), ("c", 3)])
    r, mirror = ReRandom(12), ReRandom(12)
    for _ in range(200):
        roll = mirror.next_int(4)
        want = "a" if roll < 1 else "c"
        assert spawns.pick(r) == want

def test_spawn_list_zero_weight_never_picked():
    spawns = SpawnList([("never", 0), ("always", 5)])
    r = ReRandom(1)
    assert {spawns.pick(r) for _ in range(100)} == {"always"}

def test_spawn_list_empty_raises():
    with pytest.raises(ValueError):
        SpawnList().pick(ReRandom(1))
    with pytest.raises(ValueError):
        SpawnList([("x", 0)]).pick(ReRandom(1))

def test_spawn_list_negative_rate_raises():
    with pytest.raises(ValueError):
        SpawnList([("x", -1)])

def test_spawn_list_totals():
    spawns = SpawnList()
    spawns.add("a", 2)
    spawns.add("b", 5)
    assert spawns.total == 7
    assert len(spawns) == 2
    assert spawns.can_pick()

def test_rand_range():
    r = ReRandom(30)
    rr = RandRange(3, 6)
    assert {rr.pick(r) for _ in range(200)} == {3, 4, 5}
    assert RandRange(2, 2).pick(r) == 2
    with pytest.raises(ValueError):
        RandRange(5, 1)
