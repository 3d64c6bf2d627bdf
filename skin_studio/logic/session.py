"""
Editor Session

The state one editing session shares between the controller, the
tools and the compositor: current tool, brush, active layer and the
two view toggles.
"""

from enum import Enum

from PyQt6.QtGui import QColor

from ..config import (DEFAULT_TOOL, DEFAULT_BRUSH_SIZE, DEFAULT_BRUSH_COLOR,
                      DEFAULT_LAYER, MIN_BRUSH_SIZE, MAX_BRUSH_SIZE)


class Tool(Enum):
    PEN = "pen"
    ERASER = "eraser"
    BUCKET = "bucket"


class EditorSession:
    def __init__(self):
        self.tool = Tool(DEFAULT_TOOL)
        self.brush_size = DEFAULT_BRUSH_SIZE
        self.brush_color = QColor(DEFAULT_BRUSH_COLOR)
        self.active_layer = DEFAULT_LAYER
        self.show_template = False
        self.show_bounds = False

    def set_tool(self, tool):
        self.tool = Tool(tool)

    def set_brush_size(self, size: int):
        self.brush_size = max(MIN_BRUSH_SIZE, min(MAX_BRUSH_SIZE, int(size)))

    def set_brush_color(self, color):
        # Brush color is RGB only; painting is always fully opaque
        color = QColor(color)
        color.setAlpha(255)
        self.brush_color = color

    def fill_rgba(self):
        return (self.brush_color.red(), self.brush_color.green(),
                self.brush_color.blue(), 255)

    def __repr__(self):
        return (f"EditorSession(tool={self.tool.value}, size={self.brush_size}, "
                f"color={self.brush_color.name()}, layer={self.active_layer})")
