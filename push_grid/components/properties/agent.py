"""Agent marker component.

Presence of :class:`Agent` designates the controllable entity. Only one agent
is typically present; the reducer will select the first if multiple exist.
The push engine itself treats agents exactly like any other shaped entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Marker (no fields)."""

    pass
