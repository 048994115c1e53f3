"""
Layer Classes for Pixel Studio

Represents the layered pixel grid:
- Cell: integer grid coordinate, used as the pixel map key
- Layer: a sparse map of coloured cells plus visibility and opacity
- LayerStore: the ordered layer stack and the active layer selection

The store never mutates a layer tuple or a Layer it has handed out.
Every operation builds new objects so history snapshots stay valid.

"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Dict, List, NamedTuple, Optional, Tuple

from ..config import SPRITESHEET_MAX_COLUMNS

logger = logging.getLogger(__name__)


class Cell(NamedTuple):
    """One (x, y) grid coordinate."""
    x: int
    y: int


class Pixel(NamedTuple):
    x: int
    y: int
    color: str


class VisiblePixel(NamedTuple):
    """A pixel tagged with its layer's opacity, ready for compositing."""
    x: int
    y: int
    color: str
    opacity: float


PixelMap = Dict[Cell, str]

# Fields update_layer() is allowed to change
UPDATABLE_FIELDS = ("name", "visible", "opacity", "pixels")


@dataclass
class Layer:
    """A single drawing layer"""

    id: str
    name: str
    pixels: PixelMap = field(default_factory=dict)
    visible: bool = True
    opacity: float = 1.0  # 0.0 to 1.0

    def copy(self) -> "Layer":
        """Structural deep copy. Cells and colours are immutable, so a new dict is enough."""
        return replace(self, pixels=dict(self.pixels))

    def pixel_list(self) -> List[Pixel]:
        return [Pixel(cell.x, cell.y, color) for cell, color in self.pixels.items()]

    def color_at(self, x: int, y: int) -> Optional[str]:
        return self.pixels.get(Cell(x, y))

    def to_data(self) -> dict:
        """Converts the layer into a save-able dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "pixels": [{"x": p.x, "y": p.y, "color": p.color} for p in self.pixel_list()],
            "visible": self.visible,
            "opacity": self.opacity,
        }

    @staticmethod
    def from_data(data: dict) -> "Layer":
        """Reconstructs a Layer from saved data. Duplicate coordinates: last one wins."""
        pixels = {}
        for p in data.get("pixels", []):
            pixels[Cell(int(p["x"]), int(p["y"]))] = p["color"]

        return Layer(
            id=str(data["id"]),
            name=data.get("name", str(data["id"])),
            pixels=pixels,
            visible=bool(data.get("visible", True)),
            opacity=float(data.get("opacity", 1.0)),
        )

    def __repr__(self):
        """String representation for debugging"""
        return f"Layer('{self.id}', '{self.name}', pixels={len(self.pixels)}, visible={self.visible}, opacity={self.opacity:.2f})"


def _clamp_opacity(value) -> float:
    return max(0.0, min(1.0, float(value)))


def _to_pixel_map(value) -> PixelMap:
    """Accept a {(x, y): color} mapping or a list of (x, y, color) pixels."""
    if isinstance(value, Mapping):
        return {Cell(*key): color for key, color in value.items()}
    return {Cell(x, y): color for x, y, color in value}


class LayerStore:
    """The ordered layer stack (bottom to top) and which layer is active."""

    ID_PREFIX = "layer-"

    def __init__(self, layers=None, active_layer_id: Optional[str] = None):
        if not layers:
            layers = (Layer(id=f"{self.ID_PREFIX}1", name="Layer 1"),)
        self._layers: Tuple[Layer, ...] = tuple(layers)
        self._next_number = self._first_free_number()
        self._active_layer_id = self._layers[0].id
        if active_layer_id is not None and self.get(active_layer_id) is not None:
            self._active_layer_id = active_layer_id

    # === Queries === #

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return self._layers

    @property
    def active_layer_id(self) -> str:
        return self._active_layer_id

    @property
    def active_layer(self) -> Layer:
        return self.get(self._active_layer_id)

    def __len__(self):
        return len(self._layers)

    def get(self, layer_id: str) -> Optional[Layer]:
        for layer in self._layers:
            if layer.id == layer_id:
                return layer
        return None

    def index_of(self, layer_id: str) -> int:
        for i, layer in enumerate(self._layers):
            if layer.id == layer_id:
                return i
        return -1

    def visible_pixels(self) -> List[VisiblePixel]:
        """Flattens every visible layer in layer order, tagged with the layer opacity."""
        return [
            VisiblePixel(cell.x, cell.y, color, layer.opacity)
            for layer in self._layers if layer.visible
            for cell, color in layer.pixels.items()
        ]

    def frame_pixels(self, index: int) -> List[Pixel]:
        """Pixels of one animation frame. Each layer is a frame and playback wraps around."""
        return self._layers[index % len(self._layers)].pixel_list()

    def spritesheet(self, grid_size: int, max_columns: int = SPRITESHEET_MAX_COLUMNS):
        """
        Lay the visible layers out side by side as sprite frames.

        Returns:
            tuple: (pixels, columns, rows) where pixel coordinates are offset by
                the frame's column and row times grid_size
        """
        visible = [layer for layer in self._layers if layer.visible]
        if not visible:
            return [], 0, 0

        columns = min(max_columns, len(visible))
        rows = math.ceil(len(visible) / max_columns)

        sheet = []
        for index, layer in enumerate(visible):
            row, col = divmod(index, max_columns)
            for cell, color in layer.pixels.items():
                sheet.append(Pixel(cell.x + col * grid_size, cell.y + row * grid_size, color))
        return sheet, columns, rows

    # === Mutations (each returns True when the store changed) === #

    def set_active_layer(self, layer_id: str) -> bool:
        if self.get(layer_id) is None or layer_id == self._active_layer_id:
            return False
        self._active_layer_id = layer_id
        return True

    def add_layer(self) -> Layer:
        number = self._take_number()
        new_layer = Layer(id=f"{self.ID_PREFIX}{number}", name=f"Layer {number}")
        self._layers = self._layers + (new_layer,)
        self._active_layer_id = new_layer.id
        return new_layer

    def delete_layer(self, layer_id: str) -> bool:
        if len(self._layers) <= 1:
            logger.warning("Refusing to delete the only layer")
            return False

        index = self.index_of(layer_id)
        if index < 0:
            return False

        self._layers = self._layers[:index] + self._layers[index + 1:]

        # === Fall back to the layer below (or the new bottom layer) === #
        if layer_id == self._active_layer_id:
            self._active_layer_id = self._layers[max(index - 1, 0)].id
        return True

    def duplicate_layer(self, layer_id: str) -> Optional[Layer]:
        index = self.index_of(layer_id)
        if index < 0:
            return None

        source = self._layers[index]
        number = self._take_number()
        new_layer = Layer(
            id=f"{self.ID_PREFIX}{number}",
            name=f"{source.name} Copy",
            pixels=dict(source.pixels),
        )
        self._layers = self._layers[:index + 1] + (new_layer,) + self._layers[index + 1:]
        self._active_layer_id = new_layer.id
        return new_layer

    def update_layer(self, layer_id: str, **updates) -> bool:
        index = self.index_of(layer_id)
        if index < 0:
            return False

        changes = {}
        for key, value in updates.items():
            if key not in UPDATABLE_FIELDS:
                logger.warning("update_layer: ignoring field '%s'", key)
                continue
            if key == "opacity":
                value = _clamp_opacity(value)
            elif key == "pixels":
                value = _to_pixel_map(value)
            changes[key] = value

        old = self._layers[index]
        new = replace(old, **changes)
        if new == old:
            return False
        self._replace_at(index, new)
        return True

    def replace_pixels(self, layer_id: str, pixels: PixelMap) -> bool:
        """Swap in a new pixel map for one layer. Used by the edit and transform engines."""
        index = self.index_of(layer_id)
        if index < 0 or self._layers[index].pixels == pixels:
            return False
        self._replace_at(index, replace(self._layers[index], pixels=pixels))
        return True

    def clear(self) -> bool:
        if not any(layer.pixels for layer in self._layers):
            return False
        self._layers = tuple(replace(layer, pixels={}) for layer in self._layers)
        return True

    def restore(self, layers, active_layer_id: str):
        """Replace the whole stack, e.g. from a history snapshot or a loaded file."""
        self._layers = tuple(layers)
        self._active_layer_id = active_layer_id if self.get(active_layer_id) else self._layers[0].id
        self._next_number = max(self._next_number, self._first_free_number())

    # === Internals === #

    def _replace_at(self, index: int, layer: Layer):
        self._layers = self._layers[:index] + (layer,) + self._layers[index + 1:]

    def _take_number(self) -> int:
        number = self._next_number
        self._next_number += 1
        return number

    def _first_free_number(self) -> int:
        highest = 0
        for layer in self._layers:
            suffix = layer.id[len(self.ID_PREFIX):] if layer.id.startswith(self.ID_PREFIX) else ""
            if suffix.isdigit():
                highest = max(highest, int(suffix))
        return max(highest, len(self._layers)) + 1
