"""
Generation steps.

A step mutates a MapGenContext in place and is applied exactly once per run,
in list order. Grid and floor steps are the two families that work on one
plan; they receive the run's ReRandom explicitly so the only randomness they
see is the seeded stream.
"""

import logging

from ..geom import Loc, Rect
from ..picker import RandPicker
from ..rng import ReRandom
from .context import MapGenContext
from .plans import FloorPlan, GridPlan
from .roomgen import RoomGen, RoomGenFixed

logger = logging.getLogger(__name__)


class GenStep:
    @property
    def name(self) -> str:
        return type(self).__name__

    def apply(self, context: MapGenContext) -> None:
        raise NotImplementedError

    def __repr__(self):
        return self.name


def require_grid_plan(context: MapGenContext) -> GridPlan:
    if context.grid_plan is None:
        raise ValueError("no grid plan on the context; run InitGridPlanStep first")
    return context.grid_plan

def require_room_plan(context: MapGenContext) -> FloorPlan:
    if context.room_plan is None:
        raise ValueError("no floor plan on the context; run DrawGridToFloorStep first")
    return context.room_plan


class GridPlanStep(GenStep):
    def apply(self, context: MapGenContext) -> None:
        self.apply_to_path(context.rand, require_grid_plan(context))

    def apply_to_path(self, rand: ReRandom, grid_plan: GridPlan) -> None:
        raise NotImplementedError


class FloorPlanStep(GenStep):
    def apply(self, context: MapGenContext) -> None:
        self.apply_to_path(context.rand, require_room_plan(context))

    def apply_to_path(self, rand: ReRandom, floor_plan: FloorPlan) -> None:
        raise NotImplementedError


class InitGridPlanStep(GenStep):
    def __init__(self, cells_x: int, cells_y: int, cell_width: int, cell_height: int,
                 cell_wall: int = 1):
        self.cells_x = cells_x
        self.cells_y = cells_y
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.cell_wall = cell_wall

    def apply(self, context: MapGenContext) -> None:
        context.grid_plan = GridPlan(self.cells_x, self.cells_y,
                                     self.cell_width, self.cell_height, self.cell_wall)
        logger.debug("grid plan %dx%d cells of %dx%d (wall %d)",
                     self.cells_x, self.cells_y, self.cell_width, self.cell_height, self.cell_wall)


class GridRoomsStep(GridPlanStep):
    """Give every unclaimed cell its own 1x1 room, some of them flagged as halls."""
    def __init__(self, rooms: RandPicker[RoomGen], hall_percent: int = 0):
        self.rooms = rooms
        self.hall_percent = hall_percent

    def apply_to_path(self, rand: ReRandom, grid_plan: GridPlan) -> None:
        added = 0
        for cell in list(grid_plan.empty_cells()):
            gen = self.rooms.pick(rand).copy()
            prefer_hall = rand.next_int(100) < self.hall_percent
            grid_plan.add_room(Rect.from_locs(cell, Loc(1, 1)), gen, prefer_hall=prefer_hall)
            added += 1
        logger.debug("filled %d grid cells", added)


class DrawGridToFloorStep(GenStep):
    """
    Turn the grid plan into a floor plan in tile space.

    Each grid room proposes a size, clamped to its cells' tile bounds, and is
    dropped at a random offset inside them. Rooms without a generator fill
    their bounds. Grid rooms sharing a cell edge become adjacent.
    """
    def apply(self, context: MapGenContext) -> None:
        grid = require_grid_plan(context)
        rand = context.rand
        floor = FloorPlan(grid.size)

        refs = []
        for index, plan in enumerate(grid.rooms):
            bounds = grid.get_room_pixel_bounds(index)
            gen = plan.room_gen
            if gen is None:
                gen = RoomGenFixed(bounds.size)
                plan.room_gen = gen
            proposed = gen.propose_size(rand)
            size = Loc(min(max(proposed.x, 1), bounds.width),
                       min(max(proposed.y, 1), bounds.height))
            slack = bounds.size - size
            offset = Loc(rand.next_int(slack.x + 1), rand.next_int(slack.y + 1))
            gen.prepare(size, bounds.start + offset)

            components = plan.components.clone()
            if plan.prefer_hall:
                refs.append(floor.add_hall(gen, components))
            else:
                refs.append(floor.add_room(gen, components))

        for a, b in grid.adjacent_pairs():
            floor.link(refs[a], refs[b])

        context.room_plan = floor
        logger.debug("floor plan %dx%d: %d rooms, %d halls",
                     floor.size.x, floor.size.y, floor.room_count, floor.hall_count)
