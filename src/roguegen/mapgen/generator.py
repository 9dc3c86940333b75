# src/roguegen/mapgen/generator.py
# Step pipeline runner plus the stock pipeline used by the tools.

import logging
from typing import Callable, List, Optional, Sequence

from ..components import MainHallComponent
from ..filters import RoomFilterComponent
from ..picker import PresetPicker, RandRange, SpawnList
from ..rng import ReRandom
from ..spawnables import MapEntrance, MapExit
from ..tiles import ENTRANCE, EXIT
from .carve import DrawFloorToTileStep
from .context import MapGenContext
from .roomgen import RoomGenSquare
from .special_room import SetGridSpecialRoomStep
from .stairs import FloorStairsStep
from .steps import DrawGridToFloorStep, GenStep, GridRoomsStep, InitGridPlanStep

logger = logging.getLogger(__name__)

ContextFactory = Callable[[ReRandom], MapGenContext]


class MapGen:
    """Fixed, ordered list of steps; each one is applied once per run."""
    def __init__(self, steps: Sequence[GenStep] = (),
                 context_factory: ContextFactory = MapGenContext):
        self.steps: List[GenStep] = list(steps)
        self.context_factory = context_factory

    def gen_map(self, seed: Optional[int] = None) -> MapGenContext:
        rand = ReRandom(seed)
        logger.info("generating map, seed %d, %d steps", rand.first_seed, len(self.steps))
        context = self.context_factory(rand)
        self.apply_steps(context)
        return context

    def apply_steps(self, context: MapGenContext) -> None:
        for step in self.steps:
            logger.debug("step: %s", step.name)
            step.apply(context)


def default_steps(cells_x: int = 4, cells_y: int = 3, cell_size: int = 9,
                  hall_percent: int = 20) -> List[GenStep]:
    """
    Grid of square rooms with one main hall; stairs avoid the main hall.
    """
    room_sizes = RandRange(4, cell_size + 1)
    rooms = SpawnList([
        (RoomGenSquare(room_sizes, room_sizes), 10),
        (RoomGenSquare(RandRange(3, 5), RandRange(3, 5)), 3),
    ])
    main_hall = PresetPicker(RoomGenSquare(RandRange(cell_size - 2, cell_size + 1),
                                           RandRange(cell_size - 2, cell_size + 1)))
    return [
        InitGridPlanStep(cells_x, cells_y, cell_size, cell_size, cell_wall=1),
        GridRoomsStep(rooms, hall_percent=hall_percent),
        SetGridSpecialRoomStep(main_hall, room_components=[MainHallComponent()]),
        DrawGridToFloorStep(),
        DrawFloorToTileStep(connect=True),
        FloorStairsStep([MapEntrance()], [MapExit()],
                        filters=[RoomFilterComponent(True, MainHallComponent())]),
    ]


def generate_map(seed: Optional[int] = None, steps: Optional[Sequence[GenStep]] = None) -> MapGenContext:
    return MapGen(default_steps() if steps is None else steps).gen_map(seed)


def marked_matrix(context: MapGenContext) -> List[List[int]]:
    """Copy of the tile map with entrances/exits stamped on (exits win ties)."""
    out = context.as_matrix()
    for kind, code in ((FloorStairsStep.entrance_kind, ENTRANCE), (FloorStairsStep.exit_kind, EXIT)):
        for loc, _item in context.placed(kind):
            if context.in_bounds(loc):
                out[loc.y][loc.x] = code
    return out
