# Floor plan -> tile map. Rooms draw themselves; adjacent rooms get a
# one-tile L corridor between their centers (horizontal leg first).

import logging

from ..geom import Loc, Rect
from .context import MapGenContext
from .steps import GenStep, require_room_plan

logger = logging.getLogger(__name__)


def carve_corridor(context: MapGenContext, start: Loc, end: Loc) -> None:
    x0, x1 = sorted((start.x, end.x))
    context.carve_rect(Rect(x0, start.y, x1 - x0 + 1, 1))
    y0, y1 = sorted((start.y, end.y))
    context.carve_rect(Rect(end.x, y0, 1, y1 - y0 + 1))


class DrawFloorToTileStep(GenStep):
    def __init__(self, connect: bool = True):
        self.connect = connect

    def apply(self, context: MapGenContext) -> None:
        floor = require_room_plan(context)
        context.create_new(floor.size.x, floor.size.y)

        for plan in floor.rooms + floor.halls:
            plan.room_gen.draw_on_map(context)

        corridors = 0
        if self.connect:
            for a, b in floor.edges():
                start = floor.get_room_hall(a).room_gen.draw.center
                end = floor.get_room_hall(b).room_gen.draw.center
                carve_corridor(context, start, end)
                corridors += 1
        logger.debug("drew %d rooms, %d halls, %d corridors",
                     floor.room_count, floor.hall_count, corridors)
