"""
Tests for dense array views.
"""

import mlx.core as mx
import pytest

from ca_formats.cells import CellData
from ca_formats.grid import (
    PatternGrid,
    cells_to_grid,
    level1_to_array,
    level3_to_array,
    node_to_array,
)
from ca_formats.macrocell import Branch, Level1Leaf, Level3Leaf, Node
from ca_formats.plaintext import Plaintext
from ca_formats.rle import Rle


class TestCellsToGrid:
    """Tests for rasterizing cells."""

    def test_glider(self, glider_plaintext):
        """Grid covers the bounding box of the cells."""
        grid = cells_to_grid(Plaintext(glider_plaintext))

        assert grid.shape == (3, 3)
        assert grid.origin == (0, 0)
        assert grid.population == 5
        expected = mx.array([[0, 1, 0], [0, 0, 1], [1, 1, 1]], dtype=mx.uint8)
        assert mx.array_equal(grid.states, expected)

    def test_origin(self):
        """Origin is the top-left corner of the bounding box."""
        grid = cells_to_grid(Rle("#CXRLE Pos=-4,10\n2bo!"))

        assert grid.origin == (-2, 10)
        assert grid.shape == (1, 1)

    def test_states(self):
        grid = cells_to_grid(Rle("AB$.C!"))

        expected = mx.array([[1, 2], [0, 3]], dtype=mx.uint8)
        assert mx.array_equal(grid.states, expected)

    def test_empty(self):
        grid = cells_to_grid([])

        assert grid.shape == (0, 0)
        assert grid.population == 0

    def test_clone(self):
        grid = cells_to_grid([CellData((0, 0), 2)])
        cloned = grid.clone()

        assert isinstance(cloned, PatternGrid)
        assert mx.array_equal(cloned.states, grid.states)
        assert cloned.origin == grid.origin


class TestLeafArrays:
    """Tests for Macrocell leaves as arrays."""

    def test_level3_corners(self):
        """Bit 63 is the north-west cell, bit 0 the south-east one."""
        array = level3_to_array((1 << 63) | 1)

        assert array.shape == (8, 8)
        assert array[0, 0].item() == 1
        assert array[7, 7].item() == 1
        assert int(mx.sum(array)) == 2

    def test_level3_row(self):
        """"**$" fills the first two cells of the top row."""
        array = level3_to_array(0b11 << 62)

        assert array[0, :2].tolist() == [1, 1]
        assert int(mx.sum(array)) == 2

    def test_level1(self):
        array = level1_to_array(Level1Leaf(nw=1, ne=2, sw=3, se=4))

        assert array.tolist() == [[1, 2], [3, 4]]

    def test_node_dispatch(self):
        assert node_to_array(Node(id=1, data=Level3Leaf(0))).shape == (8, 8)
        assert node_to_array(Level1Leaf(0, 0, 0, 0)).shape == (2, 2)

    def test_branch_rejected(self):
        with pytest.raises(TypeError, match="branch"):
            node_to_array(Branch(level=4, nw=0, ne=1, sw=2, se=3))
