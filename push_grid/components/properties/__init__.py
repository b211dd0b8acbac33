"""Property component aggregates.

This module re-exports *property* components: stable attributes that define an
entity's qualities (e.g. :class:`Shape`, :class:`Agent`, :class:`Block`).
The push engine reads and replaces :class:`Shape` values; the markers and
:class:`Appearance` only matter to callers and presentation code.

All properties are immutable dataclasses; creating a new instance is how
state changes are expressed between steps.
"""

from .agent import Agent
from .appearance import Appearance, AppearanceName
from .block import Block
from .position import Position
from .shape import Shape

__all__ = [
    "Agent",
    "Appearance",
    "AppearanceName",
    "Block",
    "Position",
    "Shape",
]
