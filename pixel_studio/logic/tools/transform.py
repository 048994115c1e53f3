"""Whole-layer rotate and flip. Both are bijections on a fixed grid."""

from ...enums import FlipAxis, RotateDirection
from ..layer import Cell


def rotate_pixels(pixels, direction, grid_size):
    """Rotate a pixel map a quarter turn: cw (x, y) -> (g-1-y, x), ccw (x, y) -> (y, g-1-x)."""
    direction = RotateDirection(direction)
    last = grid_size - 1
    if direction == RotateDirection.CW:
        return {Cell(last - cell.y, cell.x): color for cell, color in pixels.items()}
    return {Cell(cell.y, last - cell.x): color for cell, color in pixels.items()}


def flip_pixels(pixels, axis, grid_size):
    axis = FlipAxis(axis)
    last = grid_size - 1
    if axis == FlipAxis.HORIZONTAL:
        return {Cell(last - cell.x, cell.y): color for cell, color in pixels.items()}
    return {Cell(cell.x, last - cell.y): color for cell, color in pixels.items()}
