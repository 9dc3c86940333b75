# src/roguegen/mapgen/stairs.py
import logging
from typing import List, Optional, Sequence

from ..filters import RoomFilter, passes_all
from ..geom import Loc
from ..progress import debug_progress
from ..spawnables import Entrance, Exit, Spawnable
from .context import MapGenContext
from .steps import GenStep, require_room_plan

logger = logging.getLogger(__name__)

DEFAULT_LOC = Loc(0, 0)


class FloorStairsStep(GenStep):
    """
    Put the entrances and exits of a floor into rooms, one per room while
    unclaimed rooms last.

    Rooms that pass the filters start out free. Each marker takes a tile in a
    random free room and moves that room to the used list. When no free room
    has space, a used room is searched instead (without moving anything), and
    when that fails too the marker goes to (0,0).

    Entrances go first and exits reuse the lists the entrances left behind,
    so exits land in rooms no entrance took whenever there are enough rooms.
    Rooms are picked uniformly; distance between entrance and exit is not
    considered.
    """
    entrance_kind: type = Entrance
    exit_kind: type = Exit

    def __init__(self, entrances: Sequence[Spawnable] = (), exits: Sequence[Spawnable] = (),
                 filters: Optional[List[RoomFilter]] = None):
        self.entrances = list(entrances)
        self.exits = list(exits)
        self.filters = filters if filters is not None else []

    def eligible_rooms(self, context: MapGenContext) -> List[int]:
        room_plan = require_room_plan(context)
        return [ii for ii in range(room_plan.room_count)
                if passes_all(room_plan.get_room_plan(ii), self.filters)]

    def apply(self, context: MapGenContext) -> None:
        free_indices = self.eligible_rooms(context)
        used_indices: List[int] = []
        logger.debug("%d of %d rooms eligible for stairs",
                     len(free_indices), context.room_plan.room_count)

        for entrance in self.entrances:
            loc = self.place_one(context, self.entrance_kind, free_indices, used_indices)
            context.placer(self.entrance_kind).place_item(loc, entrance)
            debug_progress("Entrances")

        # exits see whatever the entrances left in free/used
        for exit_ in self.exits:
            loc = self.place_one(context, self.exit_kind, free_indices, used_indices)
            context.placer(self.exit_kind).place_item(loc, exit_)
            debug_progress("Exits")

    def place_one(self, context: MapGenContext, kind: type,
                  free_indices: List[int], used_indices: List[int]) -> Loc:
        loc = self.get_outlet(context, kind, free_indices, used_indices)
        if loc is None:
            loc = self.get_outlet(context, kind, used_indices, None)
        if loc is None:
            logger.debug("no room has space for %s; falling back to %s", kind.__name__, DEFAULT_LOC)
            loc = DEFAULT_LOC
        return loc

    def get_outlet(self, context: MapGenContext, kind: type,
                   free_indices: List[int], used_indices: Optional[List[int]]) -> Optional[Loc]:
        """
        Pick a free tile in a random room of free_indices.

        Rooms with no free tile are dropped from free_indices for good. When
        used_indices is given, the chosen room moves over to it.
        """
        placer = context.placer(kind)
        while free_indices:
            room_index = context.rand.next_int() % len(free_indices)
            start_room = free_indices[room_index]

            tiles = placer.get_free_tiles(context.room_plan.get_room(start_room).draw)
            if not tiles:
                del free_indices[room_index]
                continue

            start = tiles[context.rand.next_int(len(tiles))]
            if used_indices is not None:
                del free_indices[room_index]
                used_indices.append(start_room)
            return start
        return None
