"""
Tests for the flood fill engine.
"""
from pixel_studio.config import TRANSPARENT
from pixel_studio.logic.layer import Cell
from pixel_studio.logic.tools.bucket import flood_fill


def wall(cells, color="#000000"):
    return {Cell(x, y): color for x, y in cells}


class TestFloodFill:

    def test_fills_empty_grid(self):
        result = flood_fill(0, 0, TRANSPARENT, "#00FF00", {}, 3)
        assert len(result) == 9
        assert set(result.values()) == {"#00FF00"}

    def test_same_color_is_noop(self):
        pixels = wall([(0, 0)], "#FF0000")
        assert flood_fill(0, 0, "#FF0000", "#FF0000", pixels, 3) == pixels

    def test_refill_is_degenerate(self):
        first = flood_fill(0, 0, TRANSPARENT, "#00FF00", {}, 3)
        assert flood_fill(0, 0, "#00FF00", "#00FF00", first, 3) == first

    def test_input_is_not_mutated(self):
        pixels = wall([(1, 1)])
        flood_fill(0, 0, TRANSPARENT, "#00FF00", pixels, 3)
        assert pixels == wall([(1, 1)])

    def test_stops_at_color_boundary(self):
        # Vertical wall at x = 1 splits a 3x3 grid
        pixels = wall([(1, 0), (1, 1), (1, 2)])
        result = flood_fill(0, 0, TRANSPARENT, "#00FF00", pixels, 3)
        filled = {cell for cell, color in result.items() if color == "#00FF00"}
        assert filled == {Cell(0, 0), Cell(0, 1), Cell(0, 2)}
        assert all(result[Cell(1, y)] == "#000000" for y in range(3))
        assert Cell(2, 0) not in result

    def test_no_diagonal_connectivity(self):
        # (0, 0) only touches (1, 1) diagonally once the ring is walled
        pixels = wall([(1, 0), (0, 1)])
        result = flood_fill(0, 0, TRANSPARENT, "#00FF00", pixels, 3)
        assert result[Cell(0, 0)] == "#00FF00"
        assert Cell(1, 1) not in result

    def test_recolors_existing_region(self):
        pixels = wall([(0, 0), (1, 0), (2, 2)], "#FF0000")
        result = flood_fill(0, 0, "#FF0000", "#0000FF", pixels, 3)
        assert result[Cell(0, 0)] == "#0000FF"
        assert result[Cell(1, 0)] == "#0000FF"
        assert result[Cell(2, 2)] == "#FF0000"

    def test_transparent_replacement_erases_region(self):
        pixels = wall([(0, 0), (1, 0)], "#FF0000")
        pixels[Cell(2, 2)] = "#FF0000"
        result = flood_fill(1, 0, "#FF0000", TRANSPARENT, pixels, 3)
        assert result == {Cell(2, 2): "#FF0000"}

    def test_start_not_matching_target_is_noop(self):
        pixels = wall([(0, 0)], "#FF0000")
        assert flood_fill(0, 0, TRANSPARENT, "#00FF00", pixels, 3) == pixels

    def test_start_out_of_bounds_is_noop(self):
        assert flood_fill(5, 5, TRANSPARENT, "#00FF00", {}, 3) == {}

    def test_large_region_does_not_recurse(self):
        result = flood_fill(0, 0, TRANSPARENT, "#00FF00", {}, 256)
        assert len(result) == 256 * 256
