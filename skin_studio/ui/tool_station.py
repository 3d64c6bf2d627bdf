from PyQt6.QtWidgets import (QDockWidget, QFrame, QVBoxLayout, QHBoxLayout, QPushButton,
                             QLabel, QSlider, QButtonGroup, QColorDialog)
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor

from ..config import MIN_BRUSH_SIZE, MAX_BRUSH_SIZE
from ..logic.session import Tool


class ToolStation(QDockWidget):
    export_requested = pyqtSignal()

    def __init__(self, canvas_ref, parent=None):
        super().__init__("Tools", parent)
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
        self.layout.setSpacing(10)
        self.layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        # 4. Content
        title = QLabel("TOOLS")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-weight: bold; font-size: 10px;")
        self.layout.addWidget(title)

        self.tool_group = QButtonGroup(self)
        self.tool_group.setExclusive(True)
        self.tool_buttons = {}
        for tool, label, key in ((Tool.PEN, "Pen", "B"), (Tool.ERASER, "Eraser", "E"),
                                 (Tool.BUCKET, "Bucket", "G")):
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.setToolTip(f"{label} ({key})")
            btn.clicked.connect(lambda _checked, t=tool: self.set_tool(t.value))
            self.tool_group.addButton(btn)
            self.tool_buttons[tool] = btn
            self.layout.addWidget(btn)
        self.tool_buttons[self.session.tool].setChecked(True)

        # Brush size + readout
        size_row = QHBoxLayout()
        size_row.addWidget(QLabel("Size"))
        self.slider_size = QSlider(Qt.Orientation.Horizontal)
        self.slider_size.setRange(MIN_BRUSH_SIZE, MAX_BRUSH_SIZE)
        self.slider_size.setValue(self.session.brush_size)
        self.slider_size.valueChanged.connect(self.on_size_changed)
        self.lbl_size = QLabel(str(self.session.brush_size))
        self.lbl_size.setFixedWidth(24)
        size_row.addWidget(self.slider_size)
        size_row.addWidget(self.lbl_size)
        self.layout.addLayout(size_row)

        self.btn_color = QPushButton("Color")
        self.btn_color.clicked.connect(self.open_color_picker)
        self.layout.addWidget(self.btn_color)
        self.update_color_button()

        # View toggles
        self.btn_template = QPushButton("Template")
        self.btn_template.setCheckable(True)
        self.btn_template.toggled.connect(self.on_template_toggled)
        self.layout.addWidget(self.btn_template)

        self.btn_bounds = QPushButton("Bounds")
        self.btn_bounds.setCheckable(True)
        self.btn_bounds.toggled.connect(self.on_bounds_toggled)
        self.layout.addWidget(self.btn_bounds)

        self.btn_undo = QPushButton("Undo")
        self.btn_undo.clicked.connect(self.canvas.undo)
        self.layout.addWidget(self.btn_undo)

        self.btn_download = QPushButton("Download")
        self.btn_download.setObjectName("AccentBtn")
        self.btn_download.clicked.connect(self.export_requested.emit)
        self.layout.addWidget(self.btn_download)

        self.layout.addStretch()

        # Keyboard shortcuts on the canvas come back through here
        self.canvas.tool_shortcut.connect(self.set_tool)
        self.canvas.brush_size_shortcut.connect(self.slider_size.setValue)

    def set_tool(self, name):
        self.session.set_tool(name)
        self.tool_buttons[self.session.tool].setChecked(True)
        self.canvas.refresh()

    def on_size_changed(self, value):
        self.session.set_brush_size(value)
        self.lbl_size.setText(str(self.session.brush_size))
        self.canvas.update()

    def set_color(self, color):
        self.session.set_brush_color(color)
        self.update_color_button()
        self.canvas.refresh()

    def open_color_picker(self):
        color = QColorDialog.getColor(self.session.brush_color, self, "Select Color")
        if color.isValid():
            self.set_color(color)

    def update_color_button(self):
        name = self.session.brush_color.name()
        text = "black" if QColor(name).lightness() > 128 else "white"
        self.btn_color.setText(name)
        self.btn_color.setStyleSheet(f"background-color: {name}; color: {text};")

    def on_template_toggled(self, checked):
        self.session.show_template = checked
        self.canvas.refresh()

    def on_bounds_toggled(self, checked):
        self.session.show_bounds = checked
        self.canvas.refresh()
