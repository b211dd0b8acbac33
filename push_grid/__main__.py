"""Replay a move sequence on a bundled level.

Run from the repository root:
    python -m push_grid                        # show the reference level
    python -m push_grid reference RRRDDD      # apply moves, print the board
    python -m push_grid warehouse RRD --save out.png
"""

import argparse
import logging
import sys
from typing import List, Optional

from push_grid.actions import Direction
from push_grid.examples.levels import LEVEL_REGISTRY, load_level
from push_grid.logging_config import setup_logging
from push_grid.renderer.image import ImageRenderer
from push_grid.step import step
from push_grid.utils.ecs import entity_order
from push_grid.utils.text import format_board

MOVE_CODES = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "R": Direction.RIGHT,
    "L": Direction.LEFT,
}


def parse_moves(moves: str) -> List[Direction]:
    """Translate a string such as ``"RRDl"`` into directions (case-insensitive)."""
    directions: List[Direction] = []
    for code in moves.upper():
        if code not in MOVE_CODES:
            raise ValueError(f"Unknown move {code!r}; use U, D, L or R")
        directions.append(MOVE_CODES[code])
    return directions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="push_grid", description="Replay pushes on a bundled level."
    )
    parser.add_argument(
        "level", nargs="?", default="reference", choices=sorted(LEVEL_REGISTRY)
    )
    parser.add_argument("moves", nargs="?", default="", help="e.g. RRDDL")
    parser.add_argument("--save", metavar="PNG", help="write the final board image")
    parser.add_argument("--cell-size", type=int, default=70)
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        directions = parse_moves(args.moves)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    state = load_level(args.level)
    for direction in directions:
        state = step(state, direction)

    print(format_board(state))
    for eid in entity_order(state):
        cells = ", ".join(f"({c.x},{c.y})" for c in state.shape[eid].cells)
        print(f"{eid}: {cells}")

    if args.save:
        ImageRenderer(cell_size=args.cell_size).render(state).save(args.save)
        print(f"saved {args.save}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
