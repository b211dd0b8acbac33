"""Entity primitives & ID generation.

The engine models each *thing* on the board as an ``EntityID`` (an integer)
plus zero or more component dataclasses stored in persistent maps on
:class:`push_grid.state.State`.

IDs double as the registration index: they are allocated in increasing order
and never recycled, so sorting ids reproduces the order in which entities were
added to the world. The push engine relies on this to make its tie-break
between several overlapping entities deterministic.

Examples
--------
>>> from push_grid.entity import EntityIdAllocator
>>> alloc = EntityIdAllocator()
>>> alloc.new_id(), alloc.new_id()
(0, 1)
"""

from dataclasses import dataclass
from typing import Iterator, List

from push_grid.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Registry marker for a live entity (no fields)."""

    pass


def entity_id_generator(start: EntityID = 0) -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = start
    while True:
        yield eid
        eid += 1


class EntityIdAllocator:
    """Per-world ID source.

    Each level conversion owns its own allocator so registration order (and
    therefore push tie-breaks) does not depend on what else the process built.
    """

    def __init__(self, start: EntityID = 0) -> None:
        self._gen = entity_id_generator(start)

    def new_id(self) -> EntityID:
        """Return a newly allocated unique entity ID."""
        return next(self._gen)

    def new_ids(self, n: int) -> List[EntityID]:
        """Return ``n`` fresh entity IDs as a list."""
        return [self.new_id() for _ in range(n)]
