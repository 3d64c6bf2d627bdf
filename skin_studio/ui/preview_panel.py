from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QLabel
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPixmap

from ..config import CANVAS_SIZE


class PreviewPanel(QDockWidget):
    """In-game look of the skin, redrawn whenever the canvas changes"""

    def __init__(self, canvas_ref, parent=None):
        super().__init__("Preview", parent)
        self.canvas = canvas_ref

        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)

        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)

        self.layout = QVBoxLayout(self.container)
        self.layout.setContentsMargins(10, 10, 10, 10)

        self.lbl_preview = QLabel()
        self.lbl_preview.setFixedSize(CANVAS_SIZE, CANVAS_SIZE)
        self.lbl_preview.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.lbl_preview, alignment=Qt.AlignmentFlag.AlignCenter)

        self.canvas.changed.connect(self.redraw)
        self.redraw()

    def redraw(self):
        self.lbl_preview.setPixmap(QPixmap.fromImage(self.canvas.project.preview()))
