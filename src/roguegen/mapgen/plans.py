"""
Room plans: the mutable room layouts generation steps work on.

GridPlan is a coarse grid of cells; each room claims a rectangle of cells.
FloorPlan is the room graph in tile space, built from a grid plan (or by
hand) once every room knows where it is drawn.

Room indices are the position in the plan's room list and never change
within a run.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional, Tuple

from .. import config
from ..components import ComponentCollection
from ..geom import Loc, Rect
from .roomgen import RoomGen


@dataclass
class GridRoomPlan:
    bounds: Rect                       # in cells
    room_gen: Optional[RoomGen] = None
    prefer_hall: bool = False
    components: ComponentCollection = field(default_factory=ComponentCollection)


class GridPlan:
    def __init__(self, width: int, height: int, width_per_cell: int, height_per_cell: int,
                 cell_wall: int = 1):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must have at least one cell, got {width}x{height}")
        if width_per_cell <= 0 or height_per_cell <= 0:
            raise ValueError(f"cell size must be positive, got {width_per_cell}x{height_per_cell}")
        if cell_wall < 0:
            raise ValueError(f"cell_wall must be >= 0, got {cell_wall}")
        self.width = width
        self.height = height
        self.width_per_cell = width_per_cell
        self.height_per_cell = height_per_cell
        self.cell_wall = cell_wall
        self.rooms: List[GridRoomPlan] = []
        # [x][y] -> owning room index
        self.cells: List[List[Optional[int]]] = [[None] * height for _ in range(width)]

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def size(self) -> Loc:
        """Tile extent of the whole grid, outer walls included."""
        return Loc(
            self.width * self.width_per_cell + (self.width + 1) * self.cell_wall,
            self.height * self.height_per_cell + (self.height + 1) * self.cell_wall,
        )

    def get_room_plan(self, index: int) -> GridRoomPlan:
        return self.rooms[index]

    def get_room_index(self, cell: Loc) -> Optional[int]:
        return self.cells[cell.x][cell.y]

    def add_room(self, bounds: Rect, room_gen: Optional[RoomGen] = None,
                 components: Optional[ComponentCollection] = None,
                 prefer_hall: bool = False) -> int:
        if bounds.width <= 0 or bounds.height <= 0:
            raise ValueError(f"room bounds must be non-empty: {bounds}")
        if not Rect(0, 0, self.width, self.height).contains_rect(bounds):
            raise ValueError(f"room bounds {bounds} fall outside the {self.width}x{self.height} grid")
        if config.FLAGS.strict_plans:
            for cell in bounds.iter_locs():
                owner = self.cells[cell.x][cell.y]
                if owner is not None:
                    raise ValueError(f"cell {cell.as_tuple()} already belongs to room {owner}")

        index = len(self.rooms)
        self.rooms.append(GridRoomPlan(
            bounds=bounds,
            room_gen=room_gen,
            prefer_hall=prefer_hall,
            components=components if components is not None else ComponentCollection(),
        ))
        for cell in bounds.iter_locs():
            self.cells[cell.x][cell.y] = index
        return index

    def clear(self) -> None:
        self.rooms.clear()
        for column in self.cells:
            for y in range(len(column)):
                column[y] = None

    def empty_cells(self) -> Iterator[Loc]:
        # row-major, top-left first
        for y in range(self.height):
            for x in range(self.width):
                if self.cells[x][y] is None:
                    yield Loc(x, y)

    def bounds_size(self, plan: GridRoomPlan) -> Loc:
        """Tiles available to a room: its cells plus the walls between them."""
        cell_size = Loc(plan.bounds.width * self.width_per_cell,
                        plan.bounds.height * self.height_per_cell)
        wall_size = Loc((plan.bounds.width - 1) * self.cell_wall,
                        (plan.bounds.height - 1) * self.cell_wall)
        return cell_size + wall_size

    def cell_origin(self, cell: Loc) -> Loc:
        return Loc(self.cell_wall + cell.x * (self.width_per_cell + self.cell_wall),
                   self.cell_wall + cell.y * (self.height_per_cell + self.cell_wall))

    def get_room_pixel_bounds(self, index: int) -> Rect:
        plan = self.rooms[index]
        return Rect.from_locs(self.cell_origin(plan.bounds.start), self.bounds_size(plan))

    def adjacent_pairs(self) -> List[Tuple[int, int]]:
        """Room index pairs sharing at least one cell edge, sorted."""
        pairs = set()
        for x in range(self.width):
            for y in range(self.height):
                here = self.cells[x][y]
                if here is None:
                    continue
                for nx, ny in ((x + 1, y), (x, y + 1)):
                    if nx >= self.width or ny >= self.height:
                        continue
                    there = self.cells[nx][ny]
                    if there is not None and there != here:
                        pairs.add((min(here, there), max(here, there)))
        return sorted(pairs)


class RoomHallIndex(NamedTuple):
    index: int
    is_hall: bool = False


@dataclass
class FloorRoomPlan:
    room_gen: RoomGen
    components: ComponentCollection = field(default_factory=ComponentCollection)
    adjacents: List[RoomHallIndex] = field(default_factory=list)


class FloorPlan:
    def __init__(self, size: Loc):
        self.size = size
        self.rooms: List[FloorRoomPlan] = []
        self.halls: List[FloorRoomPlan] = []

    @property
    def draw_rect(self) -> Rect:
        return Rect.from_locs(Loc.zero(), self.size)

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def hall_count(self) -> int:
        return len(self.halls)

    def get_room_plan(self, index: int) -> FloorRoomPlan:
        return self.rooms[index]

    def get_room(self, index: int) -> RoomGen:
        return self.rooms[index].room_gen

    def get_hall(self, index: int) -> RoomGen:
        return self.halls[index].room_gen

    def get_room_hall(self, ref: RoomHallIndex) -> FloorRoomPlan:
        return self.halls[ref.index] if ref.is_hall else self.rooms[ref.index]

    def add_room(self, room_gen: RoomGen, components: Optional[ComponentCollection] = None,
                 *attached: RoomHallIndex) -> RoomHallIndex:
        return self._add(False, room_gen, components, attached)

    def add_hall(self, room_gen: RoomGen, components: Optional[ComponentCollection] = None,
                 *attached: RoomHallIndex) -> RoomHallIndex:
        return self._add(True, room_gen, components, attached)

    def _add(self, is_hall: bool, room_gen: RoomGen, components, attached) -> RoomHallIndex:
        if room_gen.draw is None:
            raise ValueError(f"{type(room_gen).__name__} has no draw rect; prepare() it first")
        if config.FLAGS.strict_plans and not self.draw_rect.contains_rect(room_gen.draw):
            raise ValueError(f"room draw {room_gen.draw} falls outside the floor {self.draw_rect}")
        target = self.halls if is_hall else self.rooms
        ref = RoomHallIndex(len(target), is_hall)
        target.append(FloorRoomPlan(
            room_gen=room_gen,
            components=components if components is not None else ComponentCollection(),
        ))
        for other in attached:
            self.link(ref, other)
        return ref

    def link(self, a: RoomHallIndex, b: RoomHallIndex) -> None:
        plan_a, plan_b = self.get_room_hall(a), self.get_room_hall(b)
        if b not in plan_a.adjacents:
            plan_a.adjacents.append(b)
        if a not in plan_b.adjacents:
            plan_b.adjacents.append(a)

    def edges(self) -> List[Tuple[RoomHallIndex, RoomHallIndex]]:
        out = []
        for is_hall, plans in ((False, self.rooms), (True, self.halls)):
            for i, plan in enumerate(plans):
                here = RoomHallIndex(i, is_hall)
                for other in plan.adjacents:
                    if (here.is_hall, here.index) < (other.is_hall, other.index):
                        out.append((here, other))
        return out
