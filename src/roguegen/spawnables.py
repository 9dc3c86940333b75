"""
Things a placement step can drop onto the map.

The engine never looks inside these; it only routes them through a
context's per-kind placer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


class Spawnable:
    pass


class Entrance(Spawnable):
    pass


class Exit(Spawnable):
    pass


@dataclass
class MapEntrance(Entrance):
    name: str = "entrance"


@dataclass
class MapExit(Exit):
    name: str = "exit"


@dataclass
class MapItem(Spawnable):
    item_id: str
    data: Dict[str, Any] = field(default_factory=dict)
