"""Plain-text board dumps for terminals and test failure messages."""

from typing import Dict, List

from push_grid.state import State
from push_grid.utils.ecs import entity_order

EMPTY = "."
AGENT = "@"
OVERLAP = "*"
BLOCK_GLYPHS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def glyph_map(state: State) -> Dict[int, str]:
    """Agent ids map to ``@``; other entities get letters in registration order."""
    glyphs: Dict[int, str] = {}
    letters = iter(BLOCK_GLYPHS)
    for eid in entity_order(state):
        glyphs[eid] = AGENT if eid in state.agent else next(letters, "#")
    return glyphs


def format_board(state: State) -> str:
    """Render the board row by row; cells covered by several entities show ``*``."""
    rows: List[List[str]] = [[EMPTY] * state.width for _ in range(state.height)]
    glyphs = glyph_map(state)
    for eid in entity_order(state):
        for cell in set(state.shape[eid].cells):
            current = rows[cell.y][cell.x]
            rows[cell.y][cell.x] = glyphs[eid] if current == EMPTY else OVERLAP
    return "\n".join("".join(row) for row in rows)
