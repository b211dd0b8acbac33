"""push_grid.components
=================================

Aggregate import surface for all ECS component dataclasses used by the engine.

The symbols re-exported here are curated so downstream code can import
components from a single place, e.g.::

    from push_grid.components import Position, Shape, Agent

All component classes are simple ``@dataclass`` value objects; they carry no
behavior beyond their fields and are replaced by systems during a step. See
the ``systems`` package for transformation logic.
"""

from .properties import Agent
from .properties import Appearance, AppearanceName
from .properties import Block
from .properties import Position
from .properties import Shape

__all__ = [
    "Agent",
    "Appearance",
    "AppearanceName",
    "Block",
    "Position",
    "Shape",
]
