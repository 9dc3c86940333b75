# Generation context: everything one run mutates, threaded through the steps.

from typing import Dict, List, Optional, Set, Tuple

from ..geom import Loc, Rect
from ..rng import ReRandom
from ..spawnables import Spawnable
from ..tiles import FLOOR, WALL, is_open
from .plans import FloorPlan, GridPlan


class TilePlacer:
    """
    Placement capability for one spawnable kind.

    A tile is free for this kind when it is open floor inside the map and
    no item of the same kind sits on it yet. Other kinds don't block.
    """
    def __init__(self, context: "MapGenContext", kind: type):
        self.context = context
        self.kind = kind
        self.items: List[Tuple[Loc, Spawnable]] = []
        self._occupied: Set[Loc] = set()

    def get_free_tiles(self, area: Rect) -> List[Loc]:
        return [loc for loc in area.iter_locs()
                if self.context.is_open(loc) and loc not in self._occupied]

    def place_item(self, loc: Loc, item: Spawnable) -> None:
        # Never refuses: the (0,0) fallback of the stairs step may land on a wall.
        self.items.append((loc, item))
        self._occupied.add(loc)


class MapGenContext:
    def __init__(self, rand: ReRandom):
        self.rand = rand
        self.grid_plan: Optional[GridPlan] = None
        self.room_plan: Optional[FloorPlan] = None
        self.tiles: List[List[int]] = []   # [row][col]
        self._placers: Dict[type, TilePlacer] = {}

    @property
    def seed(self) -> int:
        return self.rand.first_seed

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    @property
    def height(self) -> int:
        return len(self.tiles)

    def create_new(self, width: int, height: int) -> None:
        """Fresh all-wall tile map."""
        self.tiles = [[WALL for _ in range(width)] for _ in range(height)]

    def in_bounds(self, loc: Loc) -> bool:
        return 0 <= loc.x < self.width and 0 <= loc.y < self.height

    def get_tile(self, loc: Loc) -> int:
        return self.tiles[loc.y][loc.x]

    def set_tile(self, loc: Loc, tile: int) -> None:
        self.tiles[loc.y][loc.x] = tile

    def is_open(self, loc: Loc) -> bool:
        return self.in_bounds(loc) and is_open(self.get_tile(loc))

    def carve_rect(self, rect: Rect, tile: int = FLOOR) -> None:
        # clipped to the map
        for y in range(max(0, rect.y), min(self.height, rect.bottom)):
            row = self.tiles[y]
            for x in range(max(0, rect.x), min(self.width, rect.right)):
                row[x] = tile

    def placer(self, kind: type) -> TilePlacer:
        if kind not in self._placers:
            self._placers[kind] = TilePlacer(self, kind)
        return self._placers[kind]

    def placed(self, kind: type) -> List[Tuple[Loc, Spawnable]]:
        placer = self._placers.get(kind)
        return list(placer.items) if placer else []

    def as_matrix(self) -> List[List[int]]:
        return [row[:] for row in self.tiles]
