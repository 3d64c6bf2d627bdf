from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QListWidget, QLabel
from PyQt6.QtCore import Qt

from ..config import LAYER_NAMES


class LayerPanel(QDockWidget):
    def __init__(self, canvas_ref, parent=None):
        super().__init__("Layers", parent)
        self.canvas = canvas_ref
        self.session = canvas_ref.project.session

        # 1. Dock Config
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)

        # 2. Container
        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)

        # 3. Layout
        self.layout = QVBoxLayout(self.container)
        self.layout.setContentsMargins(10, 10, 10, 10)

        # 4. Content (fixed set, one row per skin region)
        self.layer_list = QListWidget()
        self.layer_list.addItems(LAYER_NAMES)
        self.layer_list.setCurrentRow(LAYER_NAMES.index(self.session.active_layer))
        self.layer_list.currentTextChanged.connect(self.set_active_layer)
        self.layout.addWidget(self.layer_list)

        self.lbl_bounds = QLabel()
        self.lbl_bounds.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.lbl_bounds)
        self.update_bounds_label()

    def set_active_layer(self, name):
        if not name:
            return
        self.session.active_layer = name
        self.update_bounds_label()
        self.canvas.refresh()

    def update_bounds_label(self):
        b = self.canvas.project.active_bounds()
        self.lbl_bounds.setText(f"{b.w}x{b.h} at ({b.x}, {b.y})")
