from __future__ import annotations

from typing import Any, Dict

from pyrsistent import pmap

from push_grid.components.properties import Position as PositionComp, Shape
from push_grid.entity import Entity, EntityIdAllocator
from push_grid.levels.entity_spec import EntitySpec, COMPONENT_TO_FIELD
from push_grid.levels.grid import Level
from push_grid.state import State
from push_grid.types import EntityID


def _init_store_maps() -> Dict[str, Dict[EntityID, Any]]:
    """
    Initialize mutable component-store maps mirroring State; converted to pmaps later.
    """
    return {
        "agent": {},
        "appearance": {},
        "block": {},
        "shape": {},
    }


def to_state(level: Level) -> State:
    """
    Convert a Level into an immutable State.

    Semantics:
    - Entities are allocated ids in placement order, so the State's
      registration order matches the order they were added to the Level.
    - Copies all present ECS components from each EntitySpec onto the new entity.
    - Every placed entity receives a Shape built from its cells, order preserved.
    """
    entity: Dict[EntityID, Entity] = {}
    stores: Dict[str, Dict[EntityID, Any]] = _init_store_maps()
    alloc = EntityIdAllocator()

    for placement in level.placements:
        eid = alloc.new_id()
        entity[eid] = Entity()
        for store_name, comp in placement.spec.iter_components():
            stores[store_name][eid] = comp
        stores["shape"][eid] = Shape(
            tuple(PositionComp(x, y) for x, y in placement.cells)
        )

    return State(
        width=level.width,
        height=level.height,
        entity=pmap(entity),
        agent=pmap(stores["agent"]),
        appearance=pmap(stores["appearance"]),
        block=pmap(stores["block"]),
        shape=pmap(stores["shape"]),
        turn=level.turn,
        message=level.message,
    )


def _entity_spec_from_state(state: State, eid: EntityID) -> EntitySpec:
    """
    Reconstruct an authoring-time EntitySpec from a State entity id.
    """
    kwargs: Dict[str, Any] = {}
    for _, store_name in COMPONENT_TO_FIELD.items():
        store = getattr(state, store_name)
        kwargs[store_name] = store.get(eid)
    return EntitySpec(**kwargs)


def from_state(state: State) -> Level:
    """
    Convert an immutable State back into a mutable Level.

    Shaped entities are re-added in ascending eid order, so a round trip
    through to_state preserves registration order (ids are renumbered from 0).
    """
    level = Level(
        width=state.width,
        height=state.height,
        turn=state.turn,
        message=state.message,
    )
    for eid in sorted(state.shape.keys()):
        cells = [(cell.x, cell.y) for cell in state.shape[eid].cells]
        level.add(_entity_spec_from_state(state, eid), cells)
    return level
