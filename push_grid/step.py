"""State reducer and step orchestration.

The exported :func:`step` is the gameplay entry point: it takes one tick's
move intent (a :class:`Direction`, or ``None`` when nothing was requested)
and returns the next :class:`push_grid.state.State`.

A move request always pushes the controllable agent. Whether the push moved
anything is not consulted here: the returned state is adopted as-is, and no
world-wide rollback is applied on a refused push. Callers that need the
boolean should call :func:`push_grid.systems.push.push_system` directly.
"""

import logging
from dataclasses import replace
from typing import Optional

from push_grid.actions import Direction, MOVE_DIRECTIONS
from push_grid.state import State
from push_grid.systems.push import push_system
from push_grid.types import EntityID
from push_grid.utils.ecs import agent_id_of

logger = logging.getLogger(__name__)


def step(
    state: State, direction: Optional[Direction], agent_id: Optional[EntityID] = None
) -> State:
    """Advance the simulation by one move request.

    Args:
        state (State): Previous immutable world state.
        direction (Direction | None): Requested direction, or ``None`` for no
            move this tick.
        agent_id (EntityID | None): Explicit agent entity id. If ``None`` the
            first entity in ``state.agent`` is used.

    Returns:
        State: Next state snapshot. For ``None`` the same object is returned.

    Raises:
        ValueError: If there is no agent or the direction is not recognized.
    """
    if agent_id is None and (agent_id := agent_id_of(state)) is None:
        raise ValueError("State contains no agent")

    if direction is None:
        return state

    if direction not in MOVE_DIRECTIONS:
        raise ValueError(f"Direction is not valid: {direction!r}")

    state, moved = push_system(state, agent_id, direction)
    logger.debug("Turn %d: push %s moved=%s", state.turn, direction, moved)
    return replace(state, turn=state.turn + 1)
