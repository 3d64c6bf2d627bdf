import logging
import os

from PyQt6.QtGui import QImage

from .. import config_manager
from ..utils import asset_path
from .layer import LayerStore
from .history import HistoryManager
from .session import EditorSession
from .bounds import get_bounds, load_bounds
from .compositor import render_export, render_preview, save_export

logger = logging.getLogger(__name__)


class SkinProject:
    """
    Everything one editing session works on: the layer rasters, the
    undo history, the session state and the template overlay.
    """
    def __init__(self, config=None):
        config = config or config_manager.CONFIG
        self.layers = LayerStore()
        self.session = EditorSession()
        self.history = HistoryManager(self.layers, limit=config['history']['max_depth'])
        self.split_foot = config['preview']['split_foot']
        self.bounds = load_bounds(config['bounds'])
        self.template = None

    def load_template(self, path) -> bool:
        """Load the reference overlay. A missing file just leaves it off."""
        full_path = asset_path(path)
        if not os.path.exists(full_path):
            logger.warning("Template image missing: %s", full_path)
            return False

        image = QImage(full_path)
        if image.isNull():
            logger.warning("Template image unreadable: %s", full_path)
            return False

        self.template = image
        return True

    def bounds_for(self, layer_name):
        return get_bounds(layer_name, self.bounds)

    def active_bounds(self):
        return self.bounds_for(self.session.active_layer)

    def undo(self) -> bool:
        return self.history.undo()

    def preview(self):
        return render_preview(self.layers, split_foot=self.split_foot, bounds=self.bounds)

    def export_image(self, filename) -> bool:
        return save_export(render_export(self.layers, self.bounds), filename)
