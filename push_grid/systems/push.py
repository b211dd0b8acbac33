"""Push propagation system.

Moves an entity one cell in a direction and shoves along every other entity
its new cells land on, recursively, in the world's registration order.

Resolution of a single entity:

1. Mark it visited so no later branch of the same call tree re-enters it.
2. Shift all of its cells; if any cell would leave the board the entity
   refuses and nothing about it changes.
3. Tentatively adopt the shifted shape, then for every *unvisited* entity
   whose current shape overlaps the new cells, resolve that entity first.
4. If one of those refuses, restore this entity's previous shape and refuse
   too, without inspecting the remaining overlaps.

Rollback is scoped to the failing path only. A sibling branch that already
committed before a later sibling refused keeps its move, so a push that
returns ``False`` can still leave some entities shifted.
"""

import logging
from dataclasses import replace
from typing import Set, Tuple

from push_grid.actions import Direction
from push_grid.components import Shape
from push_grid.state import State
from push_grid.types import EntityID
from push_grid.utils.ecs import entity_order
from push_grid.utils.grid import cells_overlap, shift_cells

logger = logging.getLogger(__name__)


def push_system(
    state: State, eid: EntityID, direction: Direction
) -> Tuple[State, bool]:
    """Push ``eid`` one cell towards ``direction``.

    Args:
        state (State): Current immutable state.
        eid (EntityID): Entity triggering the push.
        direction (Direction): Cardinal direction of travel.

    Returns:
        Tuple[State, bool]: The resulting state and whether the trigger moved.
        An entity without a shape never moves and yields the input state.
    """
    if eid not in state.shape:
        return state, False

    visited: Set[EntityID] = set()
    return resolve_push(state, eid, direction, visited)


def resolve_push(
    state: State, eid: EntityID, direction: Direction, visited: Set[EntityID]
) -> Tuple[State, bool]:
    """Depth-first resolution of one entity within a push call tree.

    ``visited`` is shared by the whole call tree and is updated in place; it
    only ever grows while the tree is being resolved.
    """
    visited.add(eid)

    old_shape = state.shape[eid]
    shifted = shift_cells(direction, old_shape.cells, state.width, state.height)
    if shifted is None:
        logger.debug("Entity %d refuses %s: would leave the board", eid, direction)
        return state, False

    state = replace(state, shape=state.shape.set(eid, Shape(shifted)))

    for other_id in entity_order(state):
        if other_id in visited:
            continue
        if not cells_overlap(state.shape[other_id].cells, shifted):
            continue
        state, pushed = resolve_push(state, other_id, direction, visited)
        if not pushed:
            logger.debug("Entity %d blocked by entity %d", eid, other_id)
            return replace(state, shape=state.shape.set(eid, old_shape)), False

    return state, True
