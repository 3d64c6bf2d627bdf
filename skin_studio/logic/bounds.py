"""
Layer Bounds

Every layer may only be edited inside its own rectangle of the
192x192 canvas. The rectangles come from the "bounds" table in
config.json; all eye layers share the "eye" entry.
"""

from typing import NamedTuple

from PyQt6.QtCore import QRect, QRectF

from .. import config_manager
from ..config import CANVAS_SIZE, EYE_PREFIX


class Bounds(NamedTuple):
    """Axis-aligned rectangle in raster coordinates"""
    x: int
    y: int
    w: int
    h: int

    def contains(self, x, y) -> bool:
        """Half-open test: [x, x+w) by [y, y+h)"""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    def touches(self, x, y) -> bool:
        """Closed test: a brush centre on the far edge still paints its inner half"""
        return self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h

    def left_half(self) -> 'Bounds':
        half = self.w // 2
        return Bounds(self.x, self.y, half, self.h)

    def right_half(self) -> 'Bounds':
        half = self.w // 2
        return Bounds(self.x + half, self.y, self.w - half, self.h)

    def to_rect(self) -> QRect:
        return QRect(self.x, self.y, self.w, self.h)

    def scaled(self, sx: float, sy: float) -> QRectF:
        """Map into a surface that is sx/sy times the raster size"""
        return QRectF(self.x * sx, self.y * sy, self.w * sx, self.h * sy)


FULL_CANVAS = Bounds(0, 0, CANVAS_SIZE, CANVAS_SIZE)


def _build_table(bounds_config):
    return {name: Bounds(*rect) for name, rect in bounds_config.items()}


_TABLE = _build_table(config_manager.CONFIG['bounds'])


def get_bounds(layer_name: str, table=None) -> Bounds:
    """
    Resolve a layer's editable rectangle.

    Unknown names get the full canvas rather than an error.
    """
    table = _TABLE if table is None else table
    if layer_name.startswith(EYE_PREFIX):
        return table['eye']
    return table.get(layer_name, FULL_CANVAS)


def load_bounds(bounds_config):
    """Build a lookup table from a config-style {name: [x, y, w, h]} dict"""
    return _build_table(bounds_config)
