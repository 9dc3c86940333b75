import pytest

from roguegen import config
from roguegen.components import ComponentCollection, MainHallComponent
from roguegen.geom import Loc, Rect
from roguegen.mapgen.plans import GridPlan, FloorPlan, RoomHallIndex
from roguegen.mapgen.roomgen import RoomGenFixed

def placed_gen(x, y, w, h):
    gen = RoomGenFixed(Loc(w, h))
    gen.prepare(Loc(w, h), Loc(x, y))
    return gen

def test_grid_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        GridPlan(0, 3, 5, 5)
    with pytest.raises(ValueError):
        GridPlan(3, 3, 0, 5)
    with pytest.raises(ValueError):
        GridPlan(3, 3, 5, 5, cell_wall=-1)

def test_grid_size_includes_outer_walls():
    g = GridPlan(4, 3, 9, 7, cell_wall=1)
    assert g.size == Loc(4 * 9 + 5, 3 * 7 + 4)

def test_bounds_size_formula():
    g = GridPlan(4, 4, 6, 5, cell_wall=2)
    i = g.add_room(Rect(1, 1, 3, 2))
    # cells * per-cell + (cells - 1) * wall
    assert g.bounds_size(g.get_room_plan(i)) == Loc(3 * 6 + 2 * 2, 2 * 5 + 1 * 2)
    j = g.add_room(Rect(0, 0, 1, 1))
    assert g.bounds_size(g.get_room_plan(j)) == Loc(6, 5)

def test_pixel_bounds_origin():
    g = GridPlan(3, 3, 4, 4, cell_wall=1)
    i = g.add_room(Rect(1, 2, 2, 1))
    assert g.get_room_pixel_bounds(i) == Rect(1 + 1 * 5, 1 + 2 * 5, 9, 4)

def test_add_room_indexes_and_claims_cells():
    g = GridPlan(3, 2, 4, 4)
    a = g.add_room(Rect(0, 0, 2, 1))
    b = g.add_room(Rect(2, 0, 1, 2), prefer_hall=True)
    assert (a, b) == (0, 1)
    assert g.room_count == 2
    assert g.get_room_index(Loc(1, 0)) == 0
    assert g.get_room_index(Loc(2, 1)) == 1
    assert g.get_room_index(Loc(0, 1)) is None
    assert g.get_room_plan(b).prefer_hall
    assert list(g.empty_cells()) == [Loc(0, 1), Loc(1, 1)]

def test_add_room_outside_grid_raises():
    g = GridPlan(2, 2, 4, 4)
    with pytest.raises(ValueError):
        g.add_room(Rect(1, 1, 2, 1))
    with pytest.raises(ValueError):
        g.add_room(Rect(0, 0, 0, 1))

def test_add_room_overlap_depends_on_strictness():
    g = GridPlan(2, 2, 4, 4)
    g.add_room(Rect(0, 0, 2, 2))
    with pytest.raises(ValueError):
        g.add_room(Rect(1, 1, 1, 1))
    previous = config.set_flags(strict_plans=False)
    try:
        idx = g.add_room(Rect(1, 1, 1, 1))
    finally:
        config.restore_flags(previous)
    assert g.get_room_index(Loc(1, 1)) == idx

def test_adjacent_pairs():
    g = GridPlan(3, 2, 4, 4)
    g.add_room(Rect(0, 0, 2, 1))   # 0
    g.add_room(Rect(2, 0, 1, 2))   # 1
    g.add_room(Rect(0, 1, 1, 1))   # 2
    assert g.adjacent_pairs() == [(0, 1), (0, 2)]

def test_clear():
    g = GridPlan(2, 2, 4, 4)
    g.add_room(Rect(0, 0, 2, 2))
    g.clear()
    assert g.room_count == 0
    assert len(list(g.empty_cells())) == 4

def test_floor_rooms_and_halls():
    f = FloorPlan(Loc(20, 20))
    r0 = f.add_room(placed_gen(1, 1, 4, 4), ComponentCollection([MainHallComponent()]))
    h0 = f.add_hall(placed_gen(6, 1, 2, 2), None, r0)
    r1 = f.add_room(placed_gen(10, 1, 3, 3), None, h0)
    assert (r0, h0, r1) == (RoomHallIndex(0, False), RoomHallIndex(0, True), RoomHallIndex(1, False))
    assert f.room_count == 2
    assert f.hall_count == 1
    assert f.get_room(1).draw == Rect(10, 1, 3, 3)
    assert f.get_room_plan(0).components.contains(MainHallComponent)
    assert f.get_room_hall(h0).adjacents == [r0, r1]
    assert f.get_room_plan(0).adjacents == [h0]
    assert len(f.edges()) == 2

def test_floor_link_is_idempotent():
    f = FloorPlan(Loc(10, 10))
    a = f.add_room(placed_gen(0, 0, 2, 2))
    b = f.add_room(placed_gen(4, 4, 2, 2))
    f.link(a, b)
    f.link(b, a)
    assert f.get_room_plan(0).adjacents == [b]
    assert f.get_room_plan(1).adjacents == [a]

def test_floor_rejects_unprepared_or_outside_rooms():
    f = FloorPlan(Loc(10, 10))
    with pytest.raises(ValueError):
        f.add_room(RoomGenFixed(Loc(2, 2)))
    with pytest.raises(ValueError):
        f.add_room(placed_gen(8, 8, 4, 4))
