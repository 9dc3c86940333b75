# src/roguegen/mapgen/special_room.py
import logging
from typing import List, Optional, Sequence

from ..components import RoomComponent
from ..filters import RoomFilter, passes_all
from ..picker import RandPicker
from ..progress import debug_progress
from ..rng import ReRandom
from .plans import GridPlan
from .roomgen import RoomGen
from .steps import GridPlanStep

logger = logging.getLogger(__name__)


class SetGridSpecialRoomStep(GridPlanStep):
    """
    Swap one grid room for a special room:
    - Pick a room generator and let it propose a size (the only draws made
      when nothing fits).
    - Candidates are rooms that pass every filter, are not flagged as halls,
      and whose tile bounds fit the proposed size on both axes.
    - One candidate is chosen uniformly, gets the generator and a fresh
      clone of each configured component.
    No candidate means no change.
    """
    def __init__(self, rooms: RandPicker[RoomGen],
                 room_components: Sequence[RoomComponent] = (),
                 filters: Optional[List[RoomFilter]] = None):
        self.rooms = rooms
        self.room_components = list(room_components)
        self.filters = filters if filters is not None else []

    def candidate_indices(self, grid_plan: GridPlan, size) -> List[int]:
        out = []
        for ii in range(grid_plan.room_count):
            plan = grid_plan.get_room_plan(ii)
            if not passes_all(plan, self.filters):
                continue
            if plan.prefer_hall:
                continue
            bounds = grid_plan.bounds_size(plan)
            if bounds.x >= size.x and bounds.y >= size.y:
                out.append(ii)
        return out

    def apply_to_path(self, rand: ReRandom, grid_plan: GridPlan) -> Optional[int]:
        new_gen = self.rooms.pick(rand).copy()
        size = new_gen.propose_size(rand)

        room_indices = self.candidate_indices(grid_plan, size)
        if not room_indices:
            logger.debug("no grid room fits a %dx%d special room", size.x, size.y)
            return None

        chosen = room_indices[rand.next_int(len(room_indices))]
        plan = grid_plan.get_room_plan(chosen)
        plan.room_gen = new_gen
        for component in self.room_components:
            plan.components.set(component.clone())
        logger.debug("special room %s at grid room %d", type(new_gen).__name__, chosen)
        debug_progress("Set Special Room")
        return chosen
