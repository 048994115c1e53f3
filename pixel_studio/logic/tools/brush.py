from typing import List

from ...enums import ActionType
from ..layer import Cell
from .base import BaseTool


def brush_cells(center_x: int, center_y: int, brush_size: int, grid_size: int) -> List[Cell]:
    """
    Cells covered by a square brush, clipped to the grid.

    The square spans [-offset, brush_size - offset) on each axis with
    offset = brush_size // 2, so even sizes lean towards the top-left.
    """
    offset = brush_size // 2
    span = range(-offset, brush_size - offset)

    cells = []
    for dy in span:
        y = center_y + dy
        if not 0 <= y < grid_size:
            continue
        for dx in span:
            x = center_x + dx
            if 0 <= x < grid_size:
                cells.append(Cell(x, y))
    return cells


class BrushTool(BaseTool):
    def __init__(self, session, is_eraser=False):
        super().__init__(session)
        self.is_eraser = is_eraser
        self.action = ActionType.ERASE if is_eraser else ActionType.DRAW

    def apply(self, pixels, sources):
        new_pixels = dict(pixels)
        size = self.session.brush_size
        grid_size = self.session.grid_size
        color = self.session.current_color

        for source in sources:
            for cell in brush_cells(source.x, source.y, size, grid_size):
                if self.is_eraser:
                    new_pixels.pop(cell, None)
                else:
                    new_pixels[cell] = color
        return new_pixels
