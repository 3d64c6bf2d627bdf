import logging
import math

from .base import BaseTool
from ...utils import image_to_bytes, bytes_to_image

logger = logging.getLogger(__name__)

# 8-connected: orthogonal and diagonal neighbors
NEIGHBORS = ((1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (-1, 1), (1, -1), (-1, -1))


class BucketTool(BaseTool):
    """Exact-color flood fill, confined to the active layer's bounds"""

    def is_drag_tool(self):
        return False

    def begin(self, pos):
        session = self.project.session
        x, y = math.floor(pos.x()), math.floor(pos.y())
        return self.flood_fill(session.active_layer, x, y, session.fill_rgba())

    def flood_fill(self, layer_name, start_x, start_y, fill):
        """
        Repaint every pixel reachable from the seed through neighbors of
        exactly the seed's RGBA color.

        Returns:
            int: Number of pixels changed (0 for a skipped fill)
        """
        bounds = self.project.bounds_for(layer_name)
        if not bounds.contains(start_x, start_y):
            return 0

        layers = self.project.layers
        image = layers.image(layer_name)
        w, h = image.width(), image.height()

        # === Work on a byte copy; written back in one batch === #
        data = image_to_bytes(image)
        off = (start_y * w + start_x) * 4
        target = bytes(data[off:off + 4])
        fill = bytes(fill)

        # === Nothing to do if the seed already has the fill color === #
        if target == fill:
            return 0

        bx, by, bw, bh = bounds
        visited = bytearray(bw * bh)
        stack = [(start_x, start_y)]
        changed = 0

        while stack:
            cx, cy = stack.pop()
            if not bounds.contains(cx, cy):
                continue
            v = (cy - by) * bw + (cx - bx)
            if visited[v]:
                continue
            visited[v] = 1

            off = (cy * w + cx) * 4
            if data[off:off + 4] != target:
                continue

            data[off:off + 4] = fill
            changed += 1
            for dx, dy in NEIGHBORS:
                stack.append((cx + dx, cy + dy))

        layers.set_pixels(layer_name, bytes_to_image(data, w, h))
        logger.debug("Flood fill on %s: %d pixels", layer_name, changed)
        return changed
