"""
Grid coordinate mapping and zoom/pan constraints.

Pointer positions arrive in canvas-local units, measured on the scaled
(zoomed) canvas. The logical canvas is a canvas_size square divided into
grid_size x grid_size cells.
"""

import math
from typing import Optional

from PyQt6.QtCore import QPointF

from ..config import MAX_ZOOM, MIN_ZOOM
from .layer import Cell


def scaled_size(canvas_size: float, zoom: float) -> float:
    return canvas_size * (zoom / 100)


def pointer_to_cell(x: float, y: float, canvas_size: float, zoom: float, grid_size: int) -> Optional[Cell]:
    """Map a pointer position to a grid cell, or None when it lands outside the grid."""
    if canvas_size <= 0 or zoom <= 0:
        return None

    scaled = scaled_size(canvas_size, zoom)

    # === Back to the unscaled canvas frame === #
    normalized_x = x / scaled * canvas_size
    normalized_y = y / scaled * canvas_size

    grid_x = math.floor(normalized_x / canvas_size * grid_size)
    grid_y = math.floor(normalized_y / canvas_size * grid_size)

    if not (0 <= grid_x < grid_size and 0 <= grid_y < grid_size):
        return None
    return Cell(grid_x, grid_y)


def min_zoom(canvas_size: float) -> float:
    """
    Lowest zoom allowed for a canvas.

    The pointer and the grid share one canvas_size square, so the scaled canvas
    matches the viewport exactly at 100% whatever that size is. Zooming out
    further would leave an uncovered border.
    """
    return MIN_ZOOM


def clamp_zoom(requested: float, canvas_size: float, max_zoom: float = MAX_ZOOM) -> float:
    return max(min_zoom(canvas_size), min(requested, max_zoom))


def constrain_pan(offset: QPointF, canvas_size: float, zoom: float) -> QPointF:
    """Keep the viewport inside the scaled grid: each axis in [-(scaled - canvas), 0]."""
    diff = max(scaled_size(canvas_size, zoom) - canvas_size, 0.0)
    return QPointF(
        max(min(offset.x(), 0.0), -diff),
        max(min(offset.y(), 0.0), -diff),
    )


def center_offset(canvas_size: float, zoom: float) -> QPointF:
    center = (scaled_size(canvas_size, zoom) - canvas_size) / 2
    return QPointF(-center, -center)
