"""Position component.

Immutable integer grid coordinates for a single cell. Entities never carry a
lone ``Position`` directly; their occupied cells live in a :class:`Shape`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
