"""Common type aliases.

``StepListener`` is the notification hook used by the session controller to
tell a presentation layer that a tick was accepted.
"""

from typing import Callable, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from push_grid.state import State

EntityID = int

StepListener = Callable[["State"], None]
