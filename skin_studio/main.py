import logging
import os
import sys
from PyQt6.QtWidgets import (QApplication, QMainWindow, QToolBar, QDockWidget,
                             QFileDialog, QMessageBox)
from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QAction, QKeySequence

logger = logging.getLogger(__name__)


class SkinStudio(QMainWindow):
    def __init__(self, config, project=None):
        super().__init__()

        # Custom Imports
        from .logic.project import SkinProject
        from .ui.canvas import Canvas
        from .ui.tool_station import ToolStation
        from .ui.layer_panel import LayerPanel
        from .ui.preview_panel import PreviewPanel
        from .ui.diagnostics import DiagnosticsLabel
        from . import styles

        # 1. Config & Window Setup
        self.config = config
        app_settings = self.config['app_settings']

        self.setWindowTitle(app_settings['title'])
        self.resize(app_settings['initial_width'], app_settings['initial_height'])
        self.setStyleSheet(styles.get_stylesheet())

        # 2. The Project & Canvas
        self.project = project or SkinProject(config)
        self.project.load_template(app_settings['template_path'])
        self.canvas = Canvas(self.project, self, background=self.config['theme']['canvas_bg'])
        self.setCentralWidget(self.canvas)

        # 3. The Docks
        self.station = ToolStation(self.canvas, parent=self)
        self.station.export_requested.connect(self.export_skin)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.station)

        self.layer_panel = LayerPanel(self.canvas, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.layer_panel)

        self.preview_panel = PreviewPanel(self.canvas, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.preview_panel)

        self.diagnostics = DiagnosticsLabel(self.project.history,
                                            app_settings.get('diagnostics_interval_ms', 1000))
        self.statusBar().addPermanentWidget(self.diagnostics)

        # 4. Menus & Actions
        self.setup_actions()
        self.setup_menubar()
        self.setup_toolbar()

        # Start Unlocked
        self.toggle_ui_lock(False)

    def setup_actions(self):
        """Define logic for menus and buttons"""
        self.act_export = QAction("Download Skin...", self)
        self.act_export.setShortcut(QKeySequence.StandardKey.Save)
        self.act_export.triggered.connect(self.export_skin)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        # Window-wide undo, wherever focus is
        self.act_undo = QAction("Undo", self)
        self.act_undo.setShortcut(QKeySequence.StandardKey.Undo)
        self.act_undo.triggered.connect(self.canvas.undo)

        self.act_lock = QAction("Lock Workspace", self)
        self.act_lock.setCheckable(True)
        self.act_lock.toggled.connect(self.toggle_ui_lock)

    def setup_menubar(self):
        """Create the top text menu"""
        menu = self.menuBar()

        file_menu = menu.addMenu("&File")
        file_menu.addAction(self.act_export)
        file_menu.addAction(self.act_exit)

        edit_menu = menu.addMenu("&Edit")
        edit_menu.addAction(self.act_undo)

        view_menu = menu.addMenu("&View")
        view_menu.addAction(self.act_lock)

        # Window menu lets users bring back closed panels
        win_menu = menu.addMenu("&Window")
        win_menu.addAction(self.station.toggleViewAction())
        win_menu.addAction(self.layer_panel.toggleViewAction())
        win_menu.addAction(self.preview_panel.toggleViewAction())

    def setup_toolbar(self):
        """Create the icon bar"""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setIconSize(QSize(16, 16))
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        toolbar.addAction(self.act_undo)
        toolbar.addAction(self.act_export)
        toolbar.addSeparator()
        toolbar.addAction(self.act_lock)

    def toggle_ui_lock(self, locked):
        """Freezes or Unfreezes the panels"""
        docks = [self.station, self.layer_panel, self.preview_panel]
        for dock in docks:
            if locked:
                dock.setFeatures(QDockWidget.DockWidgetFeature.NoDockWidgetFeatures)
            else:
                dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable |
                                QDockWidget.DockWidgetFeature.DockWidgetFloatable |
                                QDockWidget.DockWidgetFeature.DockWidgetClosable)

    def export_skin(self):
        default_name = self.config['app_settings']['export_filename']
        filename, _ = QFileDialog.getSaveFileName(self, "Download Skin", default_name, "PNG Image (*.png)")
        if not filename:
            return  # cancelled
        if self.project.export_image(filename):
            self.statusBar().showMessage(f"Saved {filename}", 3000)
        else:
            QMessageBox.warning(self, "Export Failed", f"Could not write {filename}")


def configure_logging():
    level = logging.DEBUG if os.environ.get("SKIN_STUDIO_DEBUG") else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main():
    configure_logging()

    # Config errors surface here rather than as an import traceback
    from .config import ConfigError
    try:
        from .config_manager import CONFIG
    except ConfigError as e:
        logger.error("Cannot start: %s", e)
        return 1

    app = QApplication(sys.argv)
    window = SkinStudio(CONFIG)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
