from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QPainter, QPen
from .base import BaseTool


class BrushTool(BaseTool):
    """Round brush for the pen and eraser tools"""

    def __init__(self, project, is_eraser=False):
        super().__init__(project)
        self.is_eraser = is_eraser
        self.last_pos = None

    def begin(self, pos):
        # Press only opens the stroke; discs are stamped on movement
        self.last_pos = None

    def drag(self, pos):
        """Stamp at pos, joined to the previous stamp. Returns True if painted."""
        pos = QPointF(pos)
        painted = self.stamp(pos, self.last_pos)
        if painted:
            self.last_pos = pos
        return painted

    def end(self):
        self.last_pos = None

    def stamp(self, pos, previous=None):
        session = self.project.session
        bounds = self.project.bounds_for(session.active_layer)

        # === Positions outside the layer's bounds are skipped, not clamped === #
        if not bounds.touches(pos.x(), pos.y()):
            return False

        layer_image = self.project.layers.image(session.active_layer)
        size = session.brush_size
        radius = size / 2

        painter = QPainter(layer_image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setClipRect(bounds.to_rect())

        if self.is_eraser:
            painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        else:
            painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(session.brush_color)
        painter.drawEllipse(pos, radius, radius)

        # === Join to the previous stamp so fast strokes have no gaps === #
        if previous is not None and previous != pos:
            painter.setPen(QPen(session.brush_color, size, Qt.PenStyle.SolidLine,
                                Qt.PenCapStyle.RoundCap, Qt.PenJoinStyle.RoundJoin))
            painter.drawLine(previous, pos)

        painter.end()
        return True
