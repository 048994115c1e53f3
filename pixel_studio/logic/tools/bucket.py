import logging
from collections import deque

from ...config import TRANSPARENT
from ...enums import ActionType
from ..layer import Cell
from .base import BaseTool

logger = logging.getLogger(__name__)


def flood_fill(start_x, start_y, target_color, replacement_color, pixels, grid_size):
    """
    BFS (Breadth-First Search) flood fill over a sparse pixel map.

    Fills every cell 4-connected to the start cell whose colour equals
    target_color. Missing cells count as TRANSPARENT; filling with
    TRANSPARENT removes the region's pixels.

    Returns:
        dict: A new pixel map. The input map is left untouched.
    """
    # === If target color is same as fill color, no need to proceed === #
    if target_color == replacement_color:
        return pixels
    if not (0 <= start_x < grid_size and 0 <= start_y < grid_size):
        return pixels
    if pixels.get(Cell(start_x, start_y), TRANSPARENT) != target_color:
        return pixels

    new_pixels = dict(pixels)
    start = Cell(start_x, start_y)
    queue = deque([start])
    visited = {start}

    while queue:
        cell = queue.popleft()

        if replacement_color == TRANSPARENT:
            new_pixels.pop(cell, None)
        else:
            new_pixels[cell] = replacement_color

        # Up, down, left, right (no diagonals)
        for nx, ny in ((cell.x + 1, cell.y), (cell.x - 1, cell.y), (cell.x, cell.y + 1), (cell.x, cell.y - 1)):
            if not (0 <= nx < grid_size and 0 <= ny < grid_size):
                continue
            neighbour = Cell(nx, ny)
            if neighbour in visited:
                continue
            if pixels.get(neighbour, TRANSPARENT) != target_color:
                continue
            visited.add(neighbour)
            queue.append(neighbour)

    logger.debug("🪣 Flood fill from (%d, %d): %d cells", start_x, start_y, len(visited))
    return new_pixels


class BucketTool(BaseTool):
    action = ActionType.FILL

    def apply(self, pixels, sources):
        # Brush size does not apply; each mirrored source floods its own region
        for source in sources:
            target = pixels.get(source, TRANSPARENT)
            pixels = flood_fill(source.x, source.y, target, self.session.current_color,
                                pixels, self.session.grid_size)
        return pixels
