"""ECS convenience queries.

Helper functions for querying entity/shape relationships without putting
iteration logic into systems. All functions are pure and operate on the
immutable :class:`push_grid.state.State` snapshot.

Every query that walks several entities does so in :func:`entity_order`, the
world's registration order.
"""

from typing import AbstractSet, Iterable, List, Optional, Tuple

from push_grid.components import Position
from push_grid.state import State
from push_grid.types import EntityID


def entity_order(state: State) -> List[EntityID]:
    """Shaped entity ids in registration order."""
    return sorted(state.shape.keys())


def occupies(state: State, eid: EntityID) -> Tuple[Position, ...]:
    """Read-only view of the cells ``eid`` currently covers."""
    return state.shape[eid].cells


def entities_overlapping(
    state: State,
    cells: Iterable[Position],
    exclude: AbstractSet[EntityID] = frozenset(),
) -> List[EntityID]:
    """Return ids (in registration order) whose shape shares a cell with ``cells``."""
    targets = set(cells)
    return [
        eid
        for eid in entity_order(state)
        if eid not in exclude and not targets.isdisjoint(state.shape[eid].cells)
    ]


def entities_at(state: State, pos: Position) -> List[EntityID]:
    """Return ids (in registration order) whose shape covers ``pos``."""
    return entities_overlapping(state, (pos,))


def agent_id_of(state: State) -> Optional[EntityID]:
    """First controllable entity id in registration order, if any."""
    return min(state.agent.keys(), default=None)
