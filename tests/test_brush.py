import pytest

from pixel_studio.logic.layer import Cell
from pixel_studio.logic.tools.brush import brush_cells


class TestBrushCells:

    def test_size_one_is_center_only(self):
        assert brush_cells(3, 4, 1, 8) == [Cell(3, 4)]

    def test_size_two_leans_top_left(self):
        # offset = 1, span = [-1, 1)
        assert set(brush_cells(3, 3, 2, 8)) == {Cell(2, 2), Cell(3, 2), Cell(2, 3), Cell(3, 3)}

    def test_size_three_is_centered(self):
        cells = set(brush_cells(3, 3, 3, 8))
        assert cells == {Cell(x, y) for x in (2, 3, 4) for y in (2, 3, 4)}

    def test_clipped_at_corner(self):
        assert set(brush_cells(0, 0, 3, 8)) == {Cell(0, 0), Cell(1, 0), Cell(0, 1), Cell(1, 1)}

    def test_no_duplicates(self):
        cells = brush_cells(5, 5, 4, 8)
        assert len(cells) == len(set(cells))

    @pytest.mark.parametrize("size", range(1, 17))
    def test_bounds_and_center_for_all_sizes(self, size):
        grid_size = 10
        for cx, cy in [(0, 0), (4, 7), (9, 9)]:
            cells = brush_cells(cx, cy, size, grid_size)
            assert Cell(cx, cy) in cells
            assert all(0 <= c.x < grid_size and 0 <= c.y < grid_size for c in cells)
            assert len(cells) <= size * size
            assert len(cells) <= grid_size * grid_size
