from typing import List

from ..enums import MirrorMode
from .layer import Cell


def mirrored_cells(x: int, y: int, grid_size: int, mode: MirrorMode) -> List[Cell]:
    """
    Every cell one drawing action touches under a mirror mode.

    The original cell comes first. Cells on a mirror axis map onto
    themselves, so the result holds 1, 2 or 4 distinct cells.
    """
    mode = MirrorMode(mode)
    far_x = grid_size - 1 - x
    far_y = grid_size - 1 - y

    cells = [Cell(x, y)]
    if mode in (MirrorMode.HORIZONTAL, MirrorMode.BOTH):
        cells.append(Cell(far_x, y))
    if mode in (MirrorMode.VERTICAL, MirrorMode.BOTH):
        cells.append(Cell(x, far_y))
    if mode == MirrorMode.BOTH:
        cells.append(Cell(far_x, far_y))

    # Remove duplicates, keep order
    return list(dict.fromkeys(cells))
