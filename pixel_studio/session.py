import logging

from PyQt6.QtCore import QObject, QPointF, pyqtSignal

from .config import DEFAULT_ZOOM
from .config_manager import EditorConfig
from .enums import ActionType, FlipAxis, GestureState, MirrorMode, RotateDirection, ToolType
from .logic.history import HistoryManager
from .logic.layer import Layer, LayerStore
from .logic.mirror import mirrored_cells
from .logic.project import ProjectManager
from .logic.tools import BrushTool, BucketTool, flip_pixels, rotate_pixels
from .logic import viewport

logger = logging.getLogger(__name__)


class EditorSession(QObject):
    """
    One live editing session: layers, tools, view and history.

    The host feeds pointer samples and commands in and repaints when the
    signals fire. Every call runs to completion before returning.
    """

    layers_changed = pyqtSignal()
    history_changed = pyqtSignal(bool, bool)  # can_undo, can_redo
    view_changed = pyqtSignal()
    tool_changed = pyqtSignal()

    def __init__(self, config: EditorConfig = None, parent=None):
        super().__init__(parent)
        self.config = config or EditorConfig()

        # === Data === #
        self.grid_size = self.config.grid_size
        self.store = LayerStore()
        self.history = HistoryManager(self.config.max_history)

        # === Tool State === #
        self.current_tool = ToolType.PEN
        self.current_color = self.config.color
        self.brush_size = self.config.brush_size
        self.mirror_mode = MirrorMode.NONE

        # === View State === #
        self.zoom = DEFAULT_ZOOM
        self.pan_offset = QPointF(0, 0)
        self.move_mode = False

        # === Gesture State === #
        self.gesture = GestureState.IDLE
        self._last_pointer = None

        # === TOOL MANAGER === #
        self.tools = {
            ToolType.PEN: BrushTool(self, is_eraser=False),
            ToolType.ERASER: BrushTool(self, is_eraser=True),
            ToolType.FILL: BucketTool(self),
        }

    # === Read-only views === #

    @property
    def layers(self):
        return self.store.layers

    @property
    def active_layer_id(self):
        return self.store.active_layer_id

    @property
    def can_undo(self):
        return self.history.can_undo()

    @property
    def can_redo(self):
        return self.history.can_redo()

    def visible_pixels(self):
        return self.store.visible_pixels()

    def frame_pixels(self, index: int):
        """Pixels of animation frame `index`; each layer is one frame."""
        return self.store.frame_pixels(index)

    def spritesheet(self):
        """Visible layers as a sprite sheet: (pixels, columns, rows)."""
        return self.store.spritesheet(self.grid_size, self.config.spritesheet_max_columns)

    # === Tool settings === #

    def set_tool(self, tool):
        self.current_tool = ToolType(tool)
        self.tool_changed.emit()

    def set_color(self, color: str):
        self.current_color = color
        self.tool_changed.emit()

    def set_brush_size(self, size: int):
        self.brush_size = max(1, min(int(size), self.config.max_brush_size))
        self.tool_changed.emit()

    def set_mirror_mode(self, mode):
        self.mirror_mode = MirrorMode(mode)
        self.tool_changed.emit()

    def set_move_mode(self, enabled: bool):
        """Pan instead of draw for gestures that start while this is on."""
        self.move_mode = bool(enabled)
        self.tool_changed.emit()

    # === DELEGATED POINTER EVENTS === #

    def pointer_press(self, x: float, y: float, canvas_size: float):
        # A gesture is classified once, when it starts
        self._last_pointer = (x, y)
        if self.move_mode:
            self.gesture = GestureState.PANNING
            return

        self.gesture = GestureState.DRAWING
        self._draw_sample(x, y, canvas_size)

    def pointer_move(self, x: float, y: float, canvas_size: float):
        if self.gesture == GestureState.DRAWING:
            self._draw_sample(x, y, canvas_size)
        elif self.gesture == GestureState.PANNING:
            last_x, last_y = self._last_pointer
            self.pan_by(x - last_x, y - last_y, canvas_size)
        self._last_pointer = (x, y)

    def pointer_release(self):
        self.gesture = GestureState.IDLE
        self._last_pointer = None

    def pan_by(self, dx: float, dy: float, canvas_size: float):
        if self.gesture != GestureState.PANNING:
            return
        moved = QPointF(self.pan_offset.x() + dx, self.pan_offset.y() + dy)
        self.pan_offset = viewport.constrain_pan(moved, canvas_size, self.zoom)
        self.view_changed.emit()

    def _draw_sample(self, x, y, canvas_size):
        cell = viewport.pointer_to_cell(x, y, canvas_size, self.zoom, self.grid_size)
        if cell is None:
            return  # Outside the grid: skip this sample only

        layer = self.store.active_layer
        tool = self.tools[self.current_tool]
        sources = mirrored_cells(cell.x, cell.y, self.grid_size, self.mirror_mode)

        new_pixels = tool.apply(layer.pixels, sources)
        if self.store.replace_pixels(layer.id, new_pixels):
            self._commit(tool.action)

    # === Commands === #

    def undo(self):
        snapshot = self.history.undo()
        if snapshot is None:
            return
        logger.debug("Undo -> '%s'", snapshot.action.value)
        self.store.restore(snapshot.layers, snapshot.active_layer_id)
        self.layers_changed.emit()
        self._emit_history()

    def redo(self):
        snapshot = self.history.redo()
        if snapshot is None:
            return
        logger.debug("Redo -> '%s'", snapshot.action.value)
        self.store.restore(snapshot.layers, snapshot.active_layer_id)
        self.layers_changed.emit()
        self._emit_history()

    def clear_canvas(self):
        if self.store.clear():
            self._commit(ActionType.CLEAR)

    def change_grid_size(self, size: int):
        """Resize the grid. Destructive: every layer is cleared and history restarts here."""
        if size < 1:
            logger.warning("Ignoring invalid grid size %r", size)
            return
        self.grid_size = int(size)
        self.store.clear()
        self._reset_history(ActionType.CLEAR)

    def set_active_layer(self, layer_id: str):
        if self.store.set_active_layer(layer_id):
            self.layers_changed.emit()

    def add_layer(self) -> Layer:
        layer = self.store.add_layer()
        self._commit(ActionType.LAYER)
        return layer

    def delete_layer(self, layer_id: str):
        if self.store.delete_layer(layer_id):
            self._commit(ActionType.LAYER)

    def duplicate_layer(self, layer_id: str):
        layer = self.store.duplicate_layer(layer_id)
        if layer is not None:
            self._commit(ActionType.LAYER)
        return layer

    def update_layer(self, layer_id: str, **updates):
        if self.store.update_layer(layer_id, **updates):
            self._commit(ActionType.LAYER)

    def rotate(self, direction):
        layer = self.store.active_layer
        rotated = rotate_pixels(layer.pixels, RotateDirection(direction), self.grid_size)
        if self.store.replace_pixels(layer.id, rotated):
            self._commit(ActionType.DRAW)

    def flip(self, axis):
        layer = self.store.active_layer
        flipped = flip_pixels(layer.pixels, FlipAxis(axis), self.grid_size)
        if self.store.replace_pixels(layer.id, flipped):
            self._commit(ActionType.DRAW)

    # === View === #

    def set_zoom_constrained(self, zoom: float, canvas_size: float) -> float:
        """Clamp and apply a zoom level, then recentre the grid. Returns the applied zoom."""
        self.zoom = viewport.clamp_zoom(zoom, canvas_size, self.config.max_zoom)
        self.pan_offset = viewport.center_offset(canvas_size, self.zoom)
        self.view_changed.emit()
        return self.zoom

    def center_grid(self, canvas_size: float):
        self.pan_offset = viewport.center_offset(canvas_size, self.zoom)
        self.view_changed.emit()

    # === Files === #

    def to_file_data(self, timestamp=None) -> dict:
        return ProjectManager.to_file_data(self.grid_size, self.store.layers, timestamp)

    def load_from_file(self, data: dict):
        """Replace the whole session state with a loaded file. View and history start over."""
        grid_size, layers = ProjectManager.from_file_data(data)
        self.grid_size = grid_size
        self.store = LayerStore(layers)

        self.zoom = DEFAULT_ZOOM
        self.pan_offset = QPointF(0, 0)
        self.pointer_release()

        logger.info("Loaded %d layer(s) on a %dx%d grid", len(layers), grid_size, grid_size)
        self._reset_history(ActionType.LAYER)
        self.view_changed.emit()

    # === Internals === #

    def _commit(self, action: ActionType):
        self.history.record(self.store.layers, self.store.active_layer_id, action)
        self.layers_changed.emit()
        self._emit_history()

    def _reset_history(self, action: ActionType):
        self.history.clear()
        self._commit(action)

    def _emit_history(self):
        self.history_changed.emit(self.can_undo, self.can_redo)
