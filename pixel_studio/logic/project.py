import json
import logging
import time

from ..config import FILE_VERSION
from ..errors import ProjectFormatError
from .layer import Layer

logger = logging.getLogger(__name__)


class ProjectManager:
    """Converts editor state to and from the pixel art file shape.

    {"version": "1.0", "gridSize": 32, "layers": [...], "timestamp": <epoch ms>}

    Only grid size and layers are persisted. Zoom, pan and history are not.
    """

    @staticmethod
    def to_file_data(grid_size, layers, timestamp=None):
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        return {
            "version": FILE_VERSION,
            "gridSize": grid_size,
            "layers": [layer.to_data() for layer in layers],
            "timestamp": timestamp,
        }

    @staticmethod
    def from_file_data(data):
        """
        Read grid size and layers from a file payload.

        The payload is trusted to be well formed; validating it is the
        caller's job (see loads()).

        Returns:
            tuple: (grid_size, list of Layer)
        """
        if data.get("version") != FILE_VERSION:
            logger.warning("Loading file version %s (expected %s)", data.get("version"), FILE_VERSION)
        layers = [Layer.from_data(layer_data) for layer_data in data["layers"]]
        return int(data["gridSize"]), layers

    @staticmethod
    def dumps(grid_size, layers, timestamp=None):
        return json.dumps(ProjectManager.to_file_data(grid_size, layers, timestamp))

    @staticmethod
    def loads(text):
        """Parse JSON text into a file payload, checking the fields the editor needs."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ProjectFormatError(f"Not a pixel art file: {e}") from e

        if not isinstance(data, dict):
            raise ProjectFormatError("Pixel art file must be a JSON object")

        grid_size = data.get("gridSize")
        if isinstance(grid_size, bool) or not isinstance(grid_size, int) or grid_size < 1:
            raise ProjectFormatError(f"Invalid gridSize: {grid_size!r}")

        layers = data.get("layers")
        if not isinstance(layers, list) or not layers:
            raise ProjectFormatError("Pixel art file has no layers")
        for layer in layers:
            if not isinstance(layer, dict) or "id" not in layer:
                raise ProjectFormatError(f"Invalid layer entry: {layer!r}")

        return data
