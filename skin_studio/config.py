"""
Configuration and Constants for Skin Studio

Fixed values of the DDNet skin layout. Tunables (bounds, theme,
history depth) live in config.json and are read by config_manager.
"""


class ConfigError(Exception):
    """Raised when config.json is missing, malformed or describes bad bounds."""


# ==========================================
# 📐 RASTER SIZES
# ==========================================
CANVAS_SIZE = 192
FINAL_WIDTH = 512
FINAL_HEIGHT = 256

# ==========================================
# 🧱 LAYERS (editor draw order)
# ==========================================
EYE_PREFIX = "eye-"
EYE_COUNT = 6

LAYER_NAMES = (
    "body", "body-shadow",
    "hand", "hand-shadow",
    "foot", "foot-shadow",
) + tuple(f"{EYE_PREFIX}{i}" for i in range(1, EYE_COUNT + 1))

SHADOW_LAYERS = ("body-shadow", "hand-shadow", "foot-shadow")
EYE_LAYERS = LAYER_NAMES[-EYE_COUNT:]

# ==========================================
# 🖼️ EXPORT SHEET (512x256)
# ==========================================
# Destination top-left per layer, drawn in this order.
# The source rectangle is always the layer's bounds.
EXPORT_PLACEMENTS = (
    ("body-shadow", (192, 0)),
    ("hand-shadow", (448, 0)),
    ("foot-shadow", (384, 128)),
    ("body", (0, 0)),
    ("hand", (384, 0)),
    ("foot", (384, 64)),
) + tuple((name, (448 - 64 * i, 192)) for i, name in enumerate(EYE_LAYERS))

# ==========================================
# 🎨 EDITOR VIEW
# ==========================================
TEMPLATE_OPACITY = 0.3
ACTIVE_LAYER_OPACITY = 1.0
INACTIVE_LAYER_OPACITY = 0.2

BOUNDS_GUIDE_COLOR = "#ff0000"
BOUNDS_GUIDE_WIDTH = 2
BOUNDS_GUIDE_DASH = (5, 3)  # pixels on, pixels off

# ==========================================
# ✏️ DEFAULT VALUES
# ==========================================
DEFAULT_TOOL = "pen"
DEFAULT_BRUSH_SIZE = 16
MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 64
BRUSH_SIZE_STEP = 2
DEFAULT_BRUSH_COLOR = "#ff0000"
DEFAULT_LAYER = "body"
