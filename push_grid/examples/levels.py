from __future__ import annotations

from typing import Callable, Dict

from push_grid.config import DEFAULT_CONFIG, LARGE_BOARD_CONFIG, GameConfig
from push_grid.levels.convert import to_state
from push_grid.levels.factories import create_agent, create_block
from push_grid.levels.grid import Level
from push_grid.state import State

# -------------------------
# Palette for authored blocks
# -------------------------
ORANGE = (230, 126, 34)
TEAL = (22, 160, 133)
PURPLE = (142, 68, 173)
RED = (192, 57, 43)


def build_reference_level(config: GameConfig = DEFAULT_CONFIG) -> Level:
    """Character in the top-left corner and one L-shaped block mid-board."""
    level = Level(config.width, config.height, name="reference")
    level.add(create_agent(), [(0, 0)])
    level.add(create_block(), [(4, 3), (4, 4), (5, 4)])
    return level


def build_warehouse_level(config: GameConfig = LARGE_BOARD_CONFIG) -> Level:
    """Larger board with several interlocking shapes.

    The bar and the hook overlap at (6, 5) at rest, so pushing either one
    drags the other along.
    """
    level = Level(config.width, config.height, name="warehouse")
    level.add(create_agent(), [(1, 1)])
    level.add(create_block(ORANGE), [(3, 1), (3, 2), (4, 2)])
    level.add(create_block(TEAL), [(6, 3), (6, 4), (6, 5), (6, 6)])
    level.add(create_block(PURPLE), [(6, 5), (7, 5), (8, 5), (8, 6)])
    level.add(create_block(RED), [(10, 9), (11, 9), (10, 10), (11, 10)])
    level.add(create_block(), [(0, 11), (1, 11), (2, 11)])
    return level


def reference_state() -> State:
    return to_state(build_reference_level())


def warehouse_state() -> State:
    return to_state(build_warehouse_level())


# Level registry for the command line and session helpers
LEVEL_REGISTRY: Dict[str, Callable[[], State]] = {
    "reference": reference_state,
    "warehouse": warehouse_state,
}


def load_level(name: str) -> State:
    """Build the named bundled level as a fresh State."""
    try:
        factory = LEVEL_REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown level {name!r}; available: {', '.join(sorted(LEVEL_REGISTRY))}"
        ) from None
    return factory()
