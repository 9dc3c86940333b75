"""
Room component tags.

A component is a typed marker stamped onto a room plan slot so later steps
can single the slot out (see filters.RoomFilterComponent). A slot holds at
most one component per concrete type.
"""

from typing import Dict, Iterable, Iterator, Optional, Type, TypeVar


class RoomComponent:
    def clone(self) -> "RoomComponent":
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class MainHallComponent(RoomComponent):
    """Marks the hub room of a floor."""
    def clone(self) -> "MainHallComponent":
        return MainHallComponent()


class ImmutableRoomComponent(RoomComponent):
    """Marks a room later steps must leave as-is."""
    def clone(self) -> "ImmutableRoomComponent":
        return ImmutableRoomComponent()


C = TypeVar("C", bound=RoomComponent)


class ComponentCollection:
    def __init__(self, components: Iterable[RoomComponent] = ()):
        self._by_type: Dict[type, RoomComponent] = {}
        for component in components:
            self.set(component)

    def set(self, component: RoomComponent) -> None:
        # replace-by-type; dict keeps the first insertion position
        self._by_type[type(component)] = component

    def get(self, kind: Type[C]) -> Optional[C]:
        return self._by_type.get(kind)

    def contains(self, kind: type) -> bool:
        return kind in self._by_type

    def remove(self, kind: type) -> bool:
        return self._by_type.pop(kind, None) is not None

    def clone(self) -> "ComponentCollection":
        return ComponentCollection(c.clone() for c in self._by_type.values())

    def __iter__(self) -> Iterator[RoomComponent]:
        return iter(list(self._by_type.values()))

    def __len__(self) -> int:
        return len(self._by_type)

    def __repr__(self):
        return f"ComponentCollection({list(self._by_type.values())!r})"
