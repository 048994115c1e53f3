import itertools

import pytest

from pixel_studio.enums import MirrorMode
from pixel_studio.logic.layer import Cell
from pixel_studio.logic.mirror import mirrored_cells


class TestMirroredCells:

    def test_none_returns_only_source(self):
        assert mirrored_cells(1, 2, 8, MirrorMode.NONE) == [Cell(1, 2)]

    def test_horizontal(self):
        assert set(mirrored_cells(1, 1, 4, MirrorMode.HORIZONTAL)) == {Cell(1, 1), Cell(2, 1)}

    def test_vertical(self):
        assert set(mirrored_cells(1, 0, 4, MirrorMode.VERTICAL)) == {Cell(1, 0), Cell(1, 3)}

    def test_both_gives_four_corners(self):
        assert set(mirrored_cells(0, 0, 4, MirrorMode.BOTH)) == {
            Cell(0, 0), Cell(3, 0), Cell(0, 3), Cell(3, 3)
        }

    def test_source_comes_first(self):
        assert mirrored_cells(0, 1, 4, MirrorMode.BOTH)[0] == Cell(0, 1)

    def test_accepts_string_mode(self):
        assert len(mirrored_cells(0, 0, 4, "horizontal")) == 2

    def test_center_of_odd_grid_maps_to_itself(self):
        for mode in MirrorMode:
            assert mirrored_cells(2, 2, 5, mode) == [Cell(2, 2)]

    def test_axis_cell_is_deduplicated(self):
        # x = 2 is the vertical mirror axis of a 5-wide grid
        assert mirrored_cells(2, 0, 5, MirrorMode.HORIZONTAL) == [Cell(2, 0)]
        assert len(mirrored_cells(2, 0, 5, MirrorMode.BOTH)) == 2

    @pytest.mark.parametrize("grid_size", [4, 5])
    def test_both_is_closed_under_mirroring(self, grid_size):
        for x, y in itertools.product(range(grid_size), repeat=2):
            cells = set(mirrored_cells(x, y, grid_size, MirrorMode.BOTH))
            assert len(cells) in (1, 2, 4)
            for cell in cells:
                assert set(mirrored_cells(cell.x, cell.y, grid_size, MirrorMode.BOTH)) == cells
