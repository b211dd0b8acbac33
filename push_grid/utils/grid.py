"""Grid math helpers.

Pure predicates and offsets used by the push system. Nothing here reads or
writes entity state; functions take the board dimensions they need.
"""

from typing import Iterable, Optional, Tuple

from push_grid.actions import DIRECTION_DELTA, Direction
from push_grid.components import Position


def is_in_bounds(width: int, height: int, pos: Position) -> bool:
    """Return True if ``pos`` lies within the ``width`` x ``height`` board."""
    return 0 <= pos.x < width and 0 <= pos.y < height


def offset_position(
    direction: Direction, pos: Position, width: int, height: int
) -> Optional[Position]:
    """Single-step neighbor of ``pos`` in ``direction``.

    Returns ``None`` when the neighbor falls outside ``[0, width) x [0, height)``.
    """
    dx, dy = DIRECTION_DELTA[direction]
    target = Position(pos.x + dx, pos.y + dy)
    if not is_in_bounds(width, height, target):
        return None
    return target


def shift_cells(
    direction: Direction, cells: Iterable[Position], width: int, height: int
) -> Optional[Tuple[Position, ...]]:
    """Offset every cell by one step, all-or-nothing.

    Returns the shifted cells in their original order, or ``None`` if any
    single cell would leave the board. An empty input shifts trivially to an
    empty tuple.
    """
    shifted: list[Position] = []
    for cell in cells:
        target = offset_position(direction, cell, width, height)
        if target is None:
            return None
        shifted.append(target)
    return tuple(shifted)


def cells_overlap(a: Iterable[Position], b: Iterable[Position]) -> bool:
    """Return True if the two cell collections share at least one coordinate."""
    return not set(a).isdisjoint(b)
