from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .entity_spec import EntitySpec

# Grid coordinate alias (x, y)
Position = Tuple[int, int]


@dataclass
class Placement:
    """An authored entity together with the cells it starts on."""

    spec: EntitySpec
    cells: List[Position]


@dataclass
class Level:
    """
    Authoring-time level representation.
    - `placements` is the ordered list of entities; order becomes the world's
      registration order (and so the push tie-break order) after conversion.
    - Shapes may overlap at rest; that is a level design choice, not an error.
    - This module is State-agnostic. Use the converter (levels.convert.to_state / from_state)
      to bridge between Level and the immutable ECS State.
    """

    width: int
    height: int
    name: Optional[str] = None

    placements: List[Placement] = field(default_factory=list)

    # Optional meta (carried through conversion)
    turn: int = 0
    message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Level dimensions must be positive, got {self.width}x{self.height}"
            )

    # -------- Editing API (purely authoring-time) --------

    def add(self, obj: EntitySpec, cells: Iterable[Position]) -> None:
        """
        Register an EntitySpec covering the given (x, y) cells.
        Raises IndexError if any cell is off the board.
        """
        cell_list = [(x, y) for x, y in cells]
        for x, y in cell_list:
            self._check_bounds(x, y)
        self.placements.append(Placement(obj, cell_list))

    def add_many(self, items: List[Tuple[EntitySpec, Iterable[Position]]]) -> None:
        """
        Register multiple entities. Each entry is (obj, cells).
        """
        for obj, cells in items:
            self.add(obj, cells)

    def remove(self, obj: EntitySpec) -> bool:
        """
        Remove a specific EntitySpec (by identity).
        Returns True if the object was found and removed, False otherwise.
        """
        for i, placement in enumerate(self.placements):
            if placement.spec is obj:
                del self.placements[i]
                return True
        return False

    def objects_at(self, pos: Position) -> List[EntitySpec]:
        """
        Return the specs whose cells include pos, in registration order.
        """
        x, y = pos
        self._check_bounds(x, y)
        return [p.spec for p in self.placements if (x, y) in p.cells]

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
