from enum import Enum


class ToolType(Enum):
    # --- CREATION ---
    PEN = "pen"         # (B) Paint
    ERASER = "eraser"   # (E) Erase
    FILL = "fill"       # (G) Bucket Fill


class MirrorMode(Enum):
    NONE = "none"
    HORIZONTAL = "horizontal"   # Mirror across the vertical axis (x flips)
    VERTICAL = "vertical"       # Mirror across the horizontal axis (y flips)
    BOTH = "both"


class ActionType(Enum):
    """Tag stored with every history snapshot."""
    DRAW = "draw"
    ERASE = "erase"
    FILL = "fill"
    CLEAR = "clear"
    LAYER = "layer"


class RotateDirection(Enum):
    CW = "cw"
    CCW = "ccw"


class FlipAxis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class GestureState(Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    PANNING = "panning"
