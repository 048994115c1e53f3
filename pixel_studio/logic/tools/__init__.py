from .base import BaseTool
from .brush import BrushTool, brush_cells
from .bucket import BucketTool, flood_fill
from .transform import flip_pixels, rotate_pixels

__all__ = [
    'BaseTool',
    'BrushTool',
    'BucketTool',
    'brush_cells',
    'flood_fill',
    'flip_pixels',
    'rotate_pixels',
]
