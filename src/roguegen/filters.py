from typing import Iterable, Sequence

from .components import RoomComponent


class RoomFilter:
    """Stateless predicate over a room plan slot (grid or floor)."""
    def passes(self, plan) -> bool:
        raise NotImplementedError


def passes_all(plan, filters: Iterable[RoomFilter]) -> bool:
    # AND over the list; an empty list lets everything through
    return all(f.passes(plan) for f in filters)


class RoomFilterComponent(RoomFilter):
    """
    Without negate: the slot must carry every listed component type.
    With negate:    the slot must carry none of them.
    """
    def __init__(self, negate: bool, *components: RoomComponent):
        self.negate = negate
        self.components: Sequence[RoomComponent] = components

    def passes(self, plan) -> bool:
        if self.negate:
            return not any(plan.components.contains(type(c)) for c in self.components)
        return all(plan.components.contains(type(c)) for c in self.components)

    def __repr__(self):
        names = ", ".join(type(c).__name__ for c in self.components)
        return f"RoomFilterComponent(negate={self.negate}, {names})"
