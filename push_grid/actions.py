"""Direction enumeration.

Defines the four cardinal :class:`Direction` values a push can travel in,
together with their unit grid deltas. Movement is always exactly one cell per
push; there are no diagonal or multi-cell moves.

``MOVE_DIRECTIONS`` is the canonical ordered list of directions; checks like
``if direction in MOVE_DIRECTIONS`` are preferred over enum name comparisons.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple


class Direction(StrEnum):
    """String enum of cardinal push directions.

    Members:
        UP: Towards row 0 (``y - 1``).
        DOWN: Away from row 0 (``y + 1``).
        RIGHT: Away from column 0 (``x + 1``).
        LEFT: Towards column 0 (``x - 1``).
    """

    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()


MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.RIGHT, Direction.LEFT]

DIRECTION_DELTA: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
}
