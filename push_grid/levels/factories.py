"""Convenience factory functions for authoring ``EntitySpec`` objects.

Each helper returns a preconfigured :class:`EntitySpec`. These are mutable
authoring-time blueprints converted into immutable ECS entities by
``levels.convert.to_state``.
"""

from __future__ import annotations

from typing import Optional, Tuple

from push_grid.components.properties import (
    Agent,
    Appearance,
    AppearanceName,
    Block,
)
from .entity_spec import EntitySpec


def create_agent() -> EntitySpec:
    """Player-controlled character."""
    return EntitySpec(
        agent=Agent(),
        appearance=Appearance(name=AppearanceName.CHARACTER, priority=0),
    )


def create_block(color: Optional[Tuple[int, int, int]] = None) -> EntitySpec:
    """Ordinary pushable block, optionally tinted."""
    return EntitySpec(
        block=Block(),
        appearance=Appearance(name=AppearanceName.BLOCK, priority=1, color=color),
    )
