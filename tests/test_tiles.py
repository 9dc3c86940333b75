from roguegen.tiles import WALL, FLOOR, ENTRANCE, EXIT, is_open

def test_only_wall_blocks():
    assert not is_open(WALL)
    assert is_open(FLOOR)

def test_overlay_codes_are_distinct():
    assert len({WALL, FLOOR, ENTRANCE, EXIT}) == 4
