"""
Cell coordinates and cell data shared by all decoders.
"""

from dataclasses import dataclass

# (x, y); x grows to the right, y grows downwards.
Coordinates = tuple[int, int]


@dataclass(frozen=True, order=True)
class CellData:
    """
    Position and state of a cell.

    Rules with more than 256 states are not supported.

    Attributes:
        position: Coordinates of the cell
        state: State of the cell; for 2-state rules 0 is dead and 1 is alive
    """

    position: Coordinates
    state: int = 1

    @classmethod
    def from_position(cls, position: Coordinates) -> "CellData":
        """Living cell (state 1) at the given position."""
        return cls(position=position, state=1)
