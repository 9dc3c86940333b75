from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Loc:
    x: int
    y: int

    @classmethod
    def zero(cls) -> "Loc":
        return cls(0, 0)

    def __add__(self, other: "Loc") -> "Loc":
        return Loc(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Loc") -> "Loc":
        return Loc(self.x - other.x, self.y - other.y)

    def as_tuple(self):
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned tile rectangle; the end corner is exclusive."""
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_locs(cls, start: Loc, size: Loc) -> "Rect":
        return cls(start.x, start.y, size.x, size.y)

    @property
    def start(self) -> Loc:
        return Loc(self.x, self.y)

    @property
    def size(self) -> Loc:
        return Loc(self.width, self.height)

    @property
    def end(self) -> Loc:
        return Loc(self.x + self.width, self.y + self.height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Loc:
        return Loc(self.x + self.width // 2, self.y + self.height // 2)

    def contains(self, loc: Loc) -> bool:
        return self.x <= loc.x < self.right and self.y <= loc.y < self.bottom

    def contains_rect(self, other: "Rect") -> bool:
        return (self.x <= other.x and self.y <= other.y
                and other.right <= self.right and other.bottom <= self.bottom)

    def iter_locs(self) -> Iterator[Loc]:
        # x-major: column by column
        for x in range(self.x, self.right):
            for y in range(self.y, self.bottom):
                yield Loc(x, y)
