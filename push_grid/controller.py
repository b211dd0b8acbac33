"""Tick-driven session controller.

:class:`GameSession` is the glue between an input source and a presentation
layer. Once per frame the caller hands it the move intent read from its input
device (a :class:`Direction` or ``None``) plus a monotonic timestamp. The
session drops intents that arrive within the move cooldown of the previous
accepted move, applies the rest through :func:`push_grid.step.step`, and then
notifies subscribed listeners with the new state so they can redraw.

Usage:

``session = GameSession(load_level("reference"))``
``session.subscribe(lambda state: redraw(state))``
``session.tick(Direction.RIGHT, now_ms=clock())``
"""

import logging
from typing import Callable, List, Optional

from push_grid.actions import Direction
from push_grid.config import DEFAULT_MOVE_DELAY_MS
from push_grid.state import State
from push_grid.step import step
from push_grid.types import EntityID, StepListener
from push_grid.utils.ecs import agent_id_of

logger = logging.getLogger(__name__)


class GameSession:
    """Holds the live state of one puzzle and rate-limits move requests.

    Arguments:
        initial_state: State the session starts from (and returns to on reset).
        move_delay_ms: Minimum interval between two accepted moves. A move is
            accepted only when strictly more than this many milliseconds have
            passed since the last accepted one.
        agent_id: Controllable entity; defaults to the state's first agent.
    """

    initial_state: State
    move_delay_ms: float
    agent_id: EntityID

    def __init__(
        self,
        initial_state: State,
        move_delay_ms: float = DEFAULT_MOVE_DELAY_MS,
        agent_id: Optional[EntityID] = None,
    ) -> None:
        if agent_id is None and (agent_id := agent_id_of(initial_state)) is None:
            raise ValueError("State contains no agent")
        if move_delay_ms < 0:
            raise ValueError(f"move_delay_ms must be non-negative, got {move_delay_ms}")
        self.initial_state = initial_state
        self.move_delay_ms = move_delay_ms
        self.agent_id = agent_id
        self._state = initial_state
        self._last_move_ms: Optional[float] = None
        self._listeners: List[StepListener] = []

    @property
    def state(self) -> State:
        return self._state

    def subscribe(self, listener: StepListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def ready(self, now_ms: float) -> bool:
        """True if a move arriving at ``now_ms`` would clear the cooldown."""
        if self._last_move_ms is None:
            return True
        return now_ms - self._last_move_ms > self.move_delay_ms

    def tick(self, direction: Optional[Direction], now_ms: float) -> bool:
        """Feed one frame's move intent.

        Returns:
            bool: True if the intent was accepted and applied (regardless of
            whether the push actually moved anything).
        """
        if direction is None:
            return False
        if not self.ready(now_ms):
            logger.debug("Dropped %s at %.1fms (cooldown)", direction, now_ms)
            return False

        self._last_move_ms = now_ms
        self._state = step(self._state, direction, self.agent_id)
        self._notify()
        return True

    def reset(self) -> None:
        """Return to the initial state and clear the cooldown."""
        logger.info("Session reset to initial state")
        self._state = self.initial_state
        self._last_move_ms = None
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
