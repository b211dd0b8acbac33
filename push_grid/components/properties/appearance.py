"""Rendering appearance component.

``Appearance`` is read only by presentation code (see
:mod:`push_grid.renderer`). Lower ``priority`` values are drawn last so they
sit on top when shapes overlap at rest.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Optional, Tuple


class AppearanceName(StrEnum):
    """Enumeration of built-in appearance categories."""

    NONE = auto()
    BLOCK = auto()
    CHARACTER = auto()


@dataclass(frozen=True)
class Appearance:
    """Visual rendering metadata.

    Attributes:
        name: Symbolic appearance identifier.
        priority: Integer priority used for layering.
        color: Optional RGB override; falls back to the renderer palette.
    """

    name: AppearanceName
    priority: int = 0
    color: Optional[Tuple[int, int, int]] = None
