"""
Dense array views of decoded patterns.

The decoders only yield cells and nodes. These helpers collect them into
mlx arrays for callers that want a grid, e.g. to seed a simulation.
"""

from dataclasses import dataclass
from typing import Iterable, Union

import mlx.core as mx
import numpy as np

from .cells import CellData, Coordinates
from .macrocell import Branch, Level1Leaf, Level3Leaf, Node, NodeData


@dataclass
class PatternGrid:
    """
    A pattern as a dense grid of states.

    Attributes:
        states: Cell states [H, W] as uint8; row 0 is the top row
        origin: Coordinates of the cell stored at states[0, 0]
    """

    states: mx.array
    origin: Coordinates = (0, 0)

    @property
    def shape(self) -> tuple[int, int]:
        """Grid dimensions (H, W)."""
        return tuple(self.states.shape)

    @property
    def population(self) -> int:
        """Number of cells with a non-zero state."""
        return int(mx.sum(self.states > 0))

    def clone(self) -> "PatternGrid":
        """Create a deep copy of the grid."""
        return PatternGrid(states=mx.array(self.states), origin=self.origin)


def _as_cell(cell: Union[CellData, Coordinates]) -> CellData:
    if isinstance(cell, CellData):
        return cell
    return CellData.from_position(tuple(cell))


def cells_to_grid(cells: Iterable[Union[CellData, Coordinates]]) -> PatternGrid:
    """
    Collect cells into a grid covering their bounding box.

    Args:
        cells: CellData values, or coordinates of living cells

    Returns:
        PatternGrid whose origin is the top-left corner of the bounding box;
        an empty 0x0 grid at (0, 0) if there are no cells
    """
    collected = [_as_cell(c) for c in cells]
    if not collected:
        return PatternGrid(states=mx.zeros((0, 0), dtype=mx.uint8))

    xs = np.array([c.position[0] for c in collected], dtype=np.int64)
    ys = np.array([c.position[1] for c in collected], dtype=np.int64)
    states = np.array([c.state for c in collected], dtype=np.uint8)

    x0, y0 = int(xs.min()), int(ys.min())
    H = int(ys.max()) - y0 + 1
    W = int(xs.max()) - x0 + 1

    grid = np.zeros((H, W), dtype=np.uint8)
    # Later cells overwrite earlier ones at the same position
    grid[ys - y0, xs - x0] = states

    return PatternGrid(states=mx.array(grid), origin=(x0, y0))


def level3_to_array(bits: int) -> mx.array:
    """
    Unpack an 8x8 Macrocell leaf.

    Args:
        bits: Leaf bitmask, bit 63 being the north-west cell

    Returns:
        uint8 array [8, 8] of 0/1 states
    """
    shifts = np.arange(63, -1, -1, dtype=np.uint64).reshape(8, 8)
    cells = (np.uint64(bits) >> shifts) & np.uint64(1)
    return mx.array(cells.astype(np.uint8))


def level1_to_array(leaf: Level1Leaf) -> mx.array:
    """States of a 2x2 leaf as a uint8 array [2, 2]."""
    return mx.array([[leaf.nw, leaf.ne], [leaf.sw, leaf.se]], dtype=mx.uint8)


def node_to_array(node: Union[Node, NodeData]) -> mx.array:
    """
    Dense array of a leaf node.

    Raises:
        TypeError: For branch nodes, whose children are only known by id
    """
    data = node.data if isinstance(node, Node) else node
    if isinstance(data, Level3Leaf):
        return level3_to_array(data.bits)
    elif isinstance(data, Level1Leaf):
        return level1_to_array(data)
    elif isinstance(data, Branch):
        raise TypeError(f"level {data.level} branch nodes cannot be expanded on their own")
    raise TypeError(f"not a Macrocell node: {data!r}")
