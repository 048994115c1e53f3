"""
Pixel Studio: layered pixel-art editing engine.

The host application owns one EditorSession, forwards pointer samples and
commands to it, and repaints from visible_pixels() when it signals.
"""

from .config_manager import EditorConfig, load_config
from .enums import ActionType, FlipAxis, GestureState, MirrorMode, RotateDirection, ToolType
from .errors import ConfigError, PixelStudioError, ProjectFormatError
from .logic import Cell, HistoryManager, Layer, LayerStore, Pixel, ProjectManager, VisiblePixel
from .session import EditorSession

__all__ = [
    "EditorConfig",
    "load_config",
    "ActionType",
    "FlipAxis",
    "GestureState",
    "MirrorMode",
    "RotateDirection",
    "ToolType",
    "ConfigError",
    "PixelStudioError",
    "ProjectFormatError",
    "Cell",
    "HistoryManager",
    "Layer",
    "LayerStore",
    "Pixel",
    "ProjectManager",
    "VisiblePixel",
    "EditorSession",
]
