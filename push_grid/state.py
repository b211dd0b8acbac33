"""Core immutable ECS ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
whole puzzle board at a single turn. Systems are pure functions that take a
previous ``State`` plus inputs (e.g. a ``Direction``) and return a *new*
``State``; nothing is mutated in place. The push engine's "tentative shift"
and "rollback" are therefore just which ``State`` value gets handed back.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not possess that
    component.
* ``shape`` holds every entity that takes part in pushing. Iteration order
    for the engine is ``sorted(shape)``: ids are handed out in registration
    order, so that is the world's stable entity order.
* Board dimensions are fixed for the lifetime of a state lineage; every
    derived ``State`` copies them unchanged.

See :mod:`push_grid.step` for how the reducer drives the push system.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, pmap

from push_grid.entity import Entity
from push_grid.components.properties import (
    Agent,
    Appearance,
    Block,
    Shape,
)
from push_grid.types import EntityID


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        width (int): Board width in cells.
        height (int): Board height in cells.
        entity (PMap[EntityID, Entity]): Registry of live entities.
        agent (PMap[EntityID, Agent]): Controllable entity marker components.
        appearance (PMap[EntityID, Appearance]): Rendering metadata.
        block (PMap[EntityID, Block]): Ordinary blocking entity markers.
        shape (PMap[EntityID, Shape]): Cells currently covered by each entity.
        turn (int): Number of move requests applied (0-based).
        message (str | None): Optional informational message.
    """

    # Board
    width: int
    height: int

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    agent: PMap[EntityID, Agent] = pmap()
    appearance: PMap[EntityID, Appearance] = pmap()
    block: PMap[EntityID, Block] = pmap()
    shape: PMap[EntityID, Shape] = pmap()

    # Status
    turn: int = 0
    message: Optional[str] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for all
            populated fields.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pmap())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
