"""
Random pickers: hand back one item per pick, drawing from a ReRandom.
"""

from dataclasses import dataclass
from typing import Generic, Iterable, List, Tuple, TypeVar

from .rng import ReRandom

T = TypeVar("T")


class RandPicker(Generic[T]):
    def pick(self, rand: ReRandom) -> T:
        raise NotImplementedError


class PresetPicker(RandPicker[T]):
    """Always the same item; consumes no draws."""
    def __init__(self, item: T):
        self.item = item

    def pick(self, rand: ReRandom) -> T:
        return self.item


class SpawnList(RandPicker[T]):
    """Weighted picker; one next_int(total) draw per pick."""
    def __init__(self, entries: Iterable[Tuple[T, int]] = ()):
        self._entries: List[Tuple[T, int]] = []
        self._total = 0
        for item, rate in entries:
            self.add(item, rate)

    def add(self, item: T, rate: int) -> None:
        if rate < 0:
            raise ValueError(f"spawn rate must be >= 0, got {rate}")
        self._entries.append((item, rate))
        self._total += rate

    @property
    def total(self) -> int:
        return self._total

    def __len__(self) -> int:
        return len(self._entries)

    def can_pick(self) -> bool:
        return self._total > 0

    def pick(self, rand: ReRandom) -> T:
        if not self.can_pick():
            raise ValueError("cannot pick from an empty spawn list")
        roll = rand.next_int(self._total)
        acc = 0
        for item, rate in self._entries:
            acc += rate
            if acc > roll:
                return item
        raise AssertionError("unreachable: roll outside total weight")


@dataclass(frozen=True)
class RandRange:
    """Integer range [min, max); min == max always yields min."""
    min: int
    max: int

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"RandRange min ({self.min}) > max ({self.max})")

    def pick(self, rand: ReRandom) -> int:
        return rand.next_range(self.min, self.max)
