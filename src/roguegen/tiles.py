# Tile codes of the reference tile map

WALL = 0
FLOOR = 1
# Overlay codes used when dumping a finished map (never stored in context.tiles)
ENTRANCE = 2
EXIT = 3

def is_open(tile: int) -> bool:
    # Anything carved counts as open; only WALL blocks placement.
    return tile != WALL
