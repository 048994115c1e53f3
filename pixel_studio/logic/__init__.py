"""
Logic Package for Pixel Studio

Contains data structures and editing algorithms:
- Layer / LayerStore: the sparse layered pixel grid
- HistoryManager: Undo/redo system
- ProjectManager: File payload conversion
- viewport / mirror: coordinate mapping helpers

"""

from .layer import Cell, Layer, LayerStore, Pixel, VisiblePixel
from .history import HistoryManager, Snapshot
from .project import ProjectManager
from .mirror import mirrored_cells
from .viewport import center_offset, clamp_zoom, constrain_pan, min_zoom, pointer_to_cell

__all__ = [
    'Cell',
    'Layer',
    'LayerStore',
    'Pixel',
    'VisiblePixel',
    'HistoryManager',
    'Snapshot',
    'ProjectManager',
    'mirrored_cells',
    'center_offset',
    'clamp_zoom',
    'constrain_pan',
    'min_zoom',
    'pointer_to_cell',
]
