"""
Compositor

Three renders of the layer store, each a pure function of the layers
and the session (nothing is cached, so any of them can be redrawn at
any time):

- Editor view: all layers scaled to the widget, active layer opaque
- Live preview: native 192x192 in the game's draw order
- Export sheet: the fixed 512x256 DDNet skin layout
"""

import logging

from PyQt6.QtCore import Qt, QRectF, QPoint
from PyQt6.QtGui import QPainter, QPen, QColor, QImage

from ..config import (CANVAS_SIZE, FINAL_WIDTH, FINAL_HEIGHT, LAYER_NAMES,
                      SHADOW_LAYERS, EYE_LAYERS, EXPORT_PLACEMENTS,
                      TEMPLATE_OPACITY, ACTIVE_LAYER_OPACITY, INACTIVE_LAYER_OPACITY,
                      BOUNDS_GUIDE_COLOR, BOUNDS_GUIDE_WIDTH, BOUNDS_GUIDE_DASH)
from .bounds import get_bounds

logger = logging.getLogger(__name__)


def _transparent_surface(width, height):
    surface = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
    surface.fill(Qt.GlobalColor.transparent)
    return surface


def _draw_region(painter, layers, name, region, dest=None):
    """Copy one rectangle of a layer; dest defaults to the same spot"""
    dest = QPoint(region.x, region.y) if dest is None else QPoint(*dest)
    painter.drawImage(dest, layers.image(name), region.to_rect())


# ==========================================
# EDITOR VIEW
# ==========================================
def render_editor(painter, target, layers, session, template=None, background=None,
                  bounds=None):
    """
    Draw the editing view into target (a QRectF on the painter's device).

    Args:
        template: Reference QImage, or None while it is not loaded
        background: Fill color for the target; left untouched if None
        bounds: Bounds table for the guide; the configured one if None
    """
    target = QRectF(target)
    painter.save()
    painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, False)

    if background is not None:
        painter.fillRect(target, QColor(background))
    else:
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        painter.fillRect(target, Qt.GlobalColor.transparent)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)

    if session.show_template and template is not None and not template.isNull():
        painter.setOpacity(TEMPLATE_OPACITY)
        painter.drawImage(target, template)

    for name in LAYER_NAMES:
        is_active = name == session.active_layer
        painter.setOpacity(ACTIVE_LAYER_OPACITY if is_active else INACTIVE_LAYER_OPACITY)
        painter.drawImage(target, layers.image(name))
    painter.setOpacity(1.0)

    if session.show_bounds:
        sx = target.width() / CANVAS_SIZE
        sy = target.height() / CANVAS_SIZE
        guide = get_bounds(session.active_layer, bounds).scaled(sx, sy).translated(target.topLeft())

        pen = QPen(QColor(BOUNDS_GUIDE_COLOR), BOUNDS_GUIDE_WIDTH)
        # Qt dash lengths are in units of the pen width
        pen.setDashPattern([d / BOUNDS_GUIDE_WIDTH for d in BOUNDS_GUIDE_DASH])
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(guide)

    painter.restore()


# ==========================================
# LIVE PREVIEW
# ==========================================
def render_preview(layers, split_foot=True, bounds=None):
    """
    Back to front: shadows, hand, back half of the foot, body,
    front half of the foot, eyes. The body overlaps the back foot
    while the front foot sits over the body.

    With split_foot=False the whole foot is drawn after the body.
    """
    preview = _transparent_surface(CANVAS_SIZE, CANVAS_SIZE)
    painter = QPainter(preview)

    for name in SHADOW_LAYERS:
        painter.drawImage(0, 0, layers.image(name))

    painter.drawImage(0, 0, layers.image("hand"))

    foot = get_bounds("foot", bounds)
    if split_foot:
        _draw_region(painter, layers, "foot", foot.left_half())
        painter.drawImage(0, 0, layers.image("body"))
        _draw_region(painter, layers, "foot", foot.right_half())
    else:
        painter.drawImage(0, 0, layers.image("body"))
        painter.drawImage(0, 0, layers.image("foot"))

    for name in EYE_LAYERS:
        painter.drawImage(0, 0, layers.image(name))

    painter.end()
    return preview


# ==========================================
# EXPORT SHEET
# ==========================================
def render_export(layers, bounds=None):
    """Place each layer's bounds rectangle on a fresh 512x256 sheet"""
    sheet = _transparent_surface(FINAL_WIDTH, FINAL_HEIGHT)
    painter = QPainter(sheet)
    for name, dest in EXPORT_PLACEMENTS:
        _draw_region(painter, layers, name, get_bounds(name, bounds), dest)
    painter.end()
    return sheet


def save_export(image, filename) -> bool:
    """Write the sheet as PNG. Returns False if the write failed."""
    ok = image.save(filename, "PNG")
    if ok:
        logger.info("Exported skin to %s", filename)
    else:
        logger.error("Could not write %s", filename)
    return ok
