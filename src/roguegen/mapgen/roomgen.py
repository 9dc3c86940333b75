# Room generators: propose a footprint, then draw themselves once placed.

import copy
from typing import Optional

from ..geom import Loc, Rect
from ..picker import RandRange
from ..rng import ReRandom


class RoomGen:
    """
    Base room generator.

    Lifecycle within one run: copy() off the template, propose_size(),
    prepare() once the owning step has decided where the room goes, then
    draw_on_map() when the floor is turned into tiles.
    """
    def __init__(self):
        self.draw: Optional[Rect] = None

    def copy(self) -> "RoomGen":
        return copy.deepcopy(self)

    def propose_size(self, rand: ReRandom) -> Loc:
        raise NotImplementedError

    def prepare(self, size: Loc, loc: Loc) -> None:
        self.draw = Rect.from_locs(loc, size)

    def draw_on_map(self, context) -> None:
        # Plain rectangle; shaped rooms override this.
        if self.draw is None:
            raise ValueError(f"{type(self).__name__} drawn before prepare()")
        context.carve_rect(self.draw)

    def __repr__(self):
        return f"{type(self).__name__}(draw={self.draw!r})"


class RoomGenSquare(RoomGen):
    def __init__(self, width: RandRange, height: RandRange):
        super().__init__()
        self.width = width
        self.height = height

    def propose_size(self, rand: ReRandom) -> Loc:
        return Loc(self.width.pick(rand), self.height.pick(rand))


class RoomGenFixed(RoomGen):
    """Fixed footprint; consumes no draws."""
    def __init__(self, size: Loc):
        super().__init__()
        self.size = size

    def propose_size(self, rand: ReRandom) -> Loc:
        return self.size
