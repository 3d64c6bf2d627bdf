"""
Layer Store for Skin Studio

One fixed-size raster per named skin region:
- body / body-shadow
- hand / hand-shadow
- foot / foot-shadow
- eye-1 .. eye-6

Pixels are kept in non-premultiplied RGBA8888 so reads and
comparisons see exactly the color that was written.
"""

from PyQt6.QtGui import QImage, QColor
from PyQt6.QtCore import Qt

from ..config import CANVAS_SIZE, LAYER_NAMES

LAYER_FORMAT = QImage.Format.Format_RGBA8888
TRANSPARENT = (0, 0, 0, 0)


def blank_raster(width: int = CANVAS_SIZE, height: int = CANVAS_SIZE) -> QImage:
    image = QImage(width, height, LAYER_FORMAT)
    image.fill(Qt.GlobalColor.transparent)
    return image


class Layer:
    """A single skin region raster"""

    def __init__(self, name: str, size: int = CANVAS_SIZE):
        self.name = name
        self.size = size
        self.image = blank_raster(size, size)

    def clear(self):
        """Wipes the layer clean."""
        self.image.fill(Qt.GlobalColor.transparent)

    def get_memory_size(self) -> float:
        """Memory used by the raster in MB (192 x 192 x 4 bytes = ~0.14 MB)"""
        return self.image.sizeInBytes() / (1024 * 1024)

    def __repr__(self):
        return f"Layer('{self.name}', {self.size}x{self.size})"


class LayerStore:
    """Owns every layer raster, keyed by layer name"""

    def __init__(self, names=LAYER_NAMES, size: int = CANVAS_SIZE):
        self.size = size
        self._layers = {name: Layer(name, size) for name in names}

    def names(self):
        return list(self._layers)

    def __contains__(self, name):
        return name in self._layers

    def image(self, name: str) -> QImage:
        """The live raster. Painters draw straight into it."""
        return self._layers[name].image

    def pixels(self, name: str) -> QImage:
        """Independent copy of a layer's raster"""
        return self._layers[name].image.copy()

    def set_pixels(self, name: str, image: QImage):
        """Replace a layer's raster with a copy of image"""
        layer = self._layers[name]
        if image.format() != LAYER_FORMAT:
            image = image.convertToFormat(LAYER_FORMAT)
        else:
            image = image.copy()
        layer.image = image

    def in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def read_pixel(self, name: str, x: int, y: int):
        """RGBA tuple at (x, y); transparent when out of range"""
        image = self._layers[name].image
        if not self.in_range(x, y):
            return TRANSPARENT
        return image.pixelColor(x, y).getRgb()

    def write_pixel(self, name: str, x: int, y: int, rgba):
        image = self._layers[name].image
        if not self.in_range(x, y):
            return
        image.setPixelColor(x, y, QColor(*rgba))

    def clear(self, name: str):
        self._layers[name].clear()

    def snapshot(self) -> dict:
        """Copies of every raster, keyed by name"""
        return {name: layer.image.copy() for name, layer in self._layers.items()}

    def restore(self, snapshot: dict):
        """Replace every raster from a snapshot() result"""
        for name, image in snapshot.items():
            self.set_pixels(name, image)

    def get_memory_size(self) -> float:
        return sum(layer.get_memory_size() for layer in self._layers.values())
