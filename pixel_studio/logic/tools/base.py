from PyQt6.QtCore import QObject

from ...enums import ActionType


class BaseTool(QObject):
    # History tag for the edits this tool commits
    action = ActionType.DRAW

    def __init__(self, session):
        super().__init__()
        self.session = session

    def apply(self, pixels, sources):
        """Return the active layer's new pixel map after editing at each source cell."""
        return pixels
