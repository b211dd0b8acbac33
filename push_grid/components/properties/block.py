from dataclasses import dataclass


@dataclass(frozen=True)
class Block:
    """Marker for an ordinary blocking entity.

    Blocks occupy cells and get shoved along when something moving in the
    same push chain lands on one of them.
    """

    pass
