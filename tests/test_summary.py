"""
Tests for pattern statistics.
"""

from ca_formats.cells import CellData
from ca_formats.plaintext import Plaintext
from ca_formats.rle import Rle
from ca_formats.summary import pattern_statistics, print_summary


class TestPatternStatistics:
    """Tests for pattern_statistics."""

    def test_glider(self, glider_rle):
        stats = pattern_statistics(Rle(glider_rle))

        assert stats["population"] == 5
        assert stats["bounding_box"] == (0, 0, 2, 2)
        assert stats["width"] == 3
        assert stats["height"] == 3
        assert stats["state_counts"] == {1: 5}

    def test_coordinates(self, glider_plaintext):
        """Plain coordinates count as state 1."""
        stats = pattern_statistics(Plaintext(glider_plaintext))

        assert stats["population"] == 5
        assert stats["state_counts"] == {1: 5}

    def test_dead_cells_not_counted(self):
        """Explicit dead cells widen the box but are not population."""
        stats = pattern_statistics([CellData((0, 0), 0), CellData((4, 1), 2)])

        assert stats["population"] == 1
        assert stats["bounding_box"] == (0, 0, 4, 1)
        assert stats["state_counts"] == {0: 1, 2: 1}

    def test_empty(self):
        stats = pattern_statistics([])

        assert stats["population"] == 0
        assert stats["bounding_box"] is None


class TestPrintSummary:
    """Tests for print_summary."""

    def test_output(self, glider_rle, capsys):
        print_summary(pattern_statistics(Rle(glider_rle)), title="Glider")
        out = capsys.readouterr().out

        assert "Glider Summary" in out
        assert "Population: 5" in out
        assert "Size: 3x3" in out
        assert "States:" not in out

    def test_multistate_output(self, capsys):
        print_summary(pattern_statistics(Rle("AB!")))
        out = capsys.readouterr().out

        assert "States:" in out
        assert "  2: 1" in out

    def test_empty_output(self, capsys):
        print_summary(pattern_statistics([]))

        assert "(empty)" in capsys.readouterr().out
