"""Board and timing configuration.

``GameConfig`` gathers the handful of knobs the engine's collaborators need:
board dimensions (fixed once a world is built), the pixel size of a cell for
renderers, and the cooldown between accepted moves for the session
controller.
"""

from dataclasses import dataclass
from typing import Tuple

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 8
DEFAULT_CELL_SIZE = 70
DEFAULT_MOVE_DELAY_MS = 30.0


@dataclass(frozen=True)
class GameConfig:
    """Static configuration for one puzzle world.

    Attributes:
        width: Board width in cells.
        height: Board height in cells.
        cell_size: Rendered edge length of one cell in pixels.
        move_delay_ms: Minimum interval between accepted moves.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cell_size: int = DEFAULT_CELL_SIZE
    move_delay_ms: float = DEFAULT_MOVE_DELAY_MS

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.move_delay_ms < 0:
            raise ValueError(
                f"move_delay_ms must be non-negative, got {self.move_delay_ms}"
            )

    @property
    def pixel_size(self) -> Tuple[int, int]:
        """Window size in pixels as ``(width, height)``."""
        return self.width * self.cell_size, self.height * self.cell_size


DEFAULT_CONFIG = GameConfig()
LARGE_BOARD_CONFIG = GameConfig(width=14, height=12)
