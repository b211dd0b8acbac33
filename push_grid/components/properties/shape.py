"""Shape component.

A :class:`Shape` is the ordered collection of cells an entity currently
covers. Stored in ``State.shape`` keyed by entity id. Shapes are replaced
wholesale whenever an entity moves; cell order is preserved across shifts.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Tuple

from .position import Position


@dataclass(frozen=True)
class Shape:
    """Ordered occupied cells.

    Duplicated cells are not expected but are not rejected either.

    Attributes:
        cells: Cells covered by the entity, in authoring order.
    """

    cells: Tuple[Position, ...] = ()

    @classmethod
    def of(cls, points: Iterable[Tuple[int, int]]) -> "Shape":
        """Build a shape from plain ``(x, y)`` pairs."""
        return cls(tuple(Position(x, y) for x, y in points))

    def cell_set(self) -> FrozenSet[Position]:
        return frozenset(self.cells)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.cells)
