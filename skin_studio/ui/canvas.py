from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPointF, QRectF, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QPen

from ..config import CANVAS_SIZE, MIN_BRUSH_SIZE, BRUSH_SIZE_STEP
from ..logic.session import Tool
from ..logic.compositor import render_editor
from ..logic.tools.brush import BrushTool
from ..logic.tools.bucket import BucketTool


class Canvas(QWidget):
    """
    The editing surface and input controller.

    Gesture state machine:
        idle --press--> (snapshot) --bucket--> fill, stay idle
                                   --pen/eraser--> dragging
        dragging --move--> stamp brush
        dragging --release--> idle
    """
    IDLE = "idle"
    DRAGGING = "dragging"

    changed = pyqtSignal()                 # layers or view changed; preview listens
    tool_shortcut = pyqtSignal(str)        # B / E / G
    brush_size_shortcut = pyqtSignal(int)  # [ / ]

    def __init__(self, project, parent=None, background="#2b2b2b"):
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(CANVAS_SIZE, CANVAS_SIZE)

        # === Data === #
        self.project = project
        self.background = background
        self.state = self.IDLE

        # === TOOL MANAGER === #
        self.tools = {
            Tool.PEN: BrushTool(project, is_eraser=False),
            Tool.ERASER: BrushTool(project, is_eraser=True),
            Tool.BUCKET: BucketTool(project),
        }
        self.active_tool = None

        # === Cursor State === #
        self.cursor_pos = QPointF(0, 0)
        self.cursor_widget_pos = QPointF(0, 0)
        self.show_cursor_circle = False

    # === View Geometry === #
    def display_rect(self) -> QRectF:
        """Largest centered square the raster is drawn into"""
        side = min(self.width(), self.height())
        return QRectF((self.width() - side) / 2, (self.height() - side) / 2, side, side)

    @property
    def scale_factor(self):
        return self.display_rect().width() / CANVAS_SIZE

    def map_to_canvas(self, widget_point) -> QPointF:
        rect = self.display_rect()
        x = (widget_point.x() - rect.x()) * (CANVAS_SIZE / rect.width())
        y = (widget_point.y() - rect.y()) * (CANVAS_SIZE / rect.height())
        return QPointF(x, y)

    def refresh(self):
        self.update()
        self.changed.emit()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(self.background))
        render_editor(painter, self.display_rect(), self.project.layers,
                      self.project.session, self.project.template,
                      background=QColor(self.background).darker(120),
                      bounds=self.project.bounds)

        # === Cursor Ghost === #
        session = self.project.session
        if self.show_cursor_circle and session.tool in (Tool.PEN, Tool.ERASER):
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            radius = session.brush_size / 2 * self.scale_factor
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.setPen(QPen(QColor(0, 0, 0, 150), 1))
            painter.drawEllipse(self.cursor_widget_pos, radius, radius)
            painter.setPen(QPen(QColor(255, 255, 255, 150), 1))
            painter.drawEllipse(self.cursor_widget_pos, max(radius - 1, 0), max(radius - 1, 0))
        painter.end()

    # === GESTURES (called by the Qt handlers, usable directly) === #
    def pointer_down(self, canvas_pos):
        if self.state == self.DRAGGING:
            return
        tool = self.tools[self.project.session.tool]

        # One snapshot per user action, so one undo reverts it whole
        self.project.history.snapshot()
        tool.begin(canvas_pos)

        if tool.is_drag_tool():
            self.active_tool = tool
            self.state = self.DRAGGING
        self.refresh()

    def pointer_move(self, canvas_pos):
        if self.state != self.DRAGGING:
            return
        if self.active_tool.drag(canvas_pos):
            self.refresh()

    def pointer_up(self):
        if self.state != self.DRAGGING:
            return
        self.active_tool.end()
        self.active_tool = None
        self.state = self.IDLE

    def undo(self):
        if self.state == self.DRAGGING:
            self.pointer_up()
        self.project.undo()
        self.refresh()

    # === DELEGATED INPUT EVENTS === #
    def mousePressEvent(self, event):
        self.setFocus()
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self.pointer_down(self.map_to_canvas(event.position()))

    def mouseMoveEvent(self, event):
        self.cursor_widget_pos = event.position()
        self.cursor_pos = self.map_to_canvas(event.position())
        self.show_cursor_circle = True
        self.update()  # For cursor ghost
        self.pointer_move(self.cursor_pos)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.pointer_up()

    def keyPressEvent(self, event):
        key = event.key()
        modifiers = event.modifiers()

        # === Undo (Ctrl+Z / Cmd+Z) === #
        if modifiers & Qt.KeyboardModifier.ControlModifier and key == Qt.Key.Key_Z:
            self.undo()
            return

        if key == Qt.Key.Key_B: self.tool_shortcut.emit(Tool.PEN.value)
        elif key == Qt.Key.Key_E: self.tool_shortcut.emit(Tool.ERASER.value)
        elif key == Qt.Key.Key_G: self.tool_shortcut.emit(Tool.BUCKET.value)
        elif key == Qt.Key.Key_BracketLeft:
            size = max(MIN_BRUSH_SIZE, self.project.session.brush_size - BRUSH_SIZE_STEP)
            self.brush_size_shortcut.emit(size)
        elif key == Qt.Key.Key_BracketRight:
            self.brush_size_shortcut.emit(self.project.session.brush_size + BRUSH_SIZE_STEP)
        else:
            super().keyPressEvent(event)

    def leaveEvent(self, event):
        self.show_cursor_circle = False
        self.update()
        super().leaveEvent(event)
