import pytest

from skin_studio.config import CANVAS_SIZE
from skin_studio.logic.tools.bucket import BucketTool

from conftest import RED, GREEN, BLUE, CLEAR, fill_layer, pt


@pytest.fixture
def bucket(project):
    project.session.set_brush_color("#ff0000")
    return BucketTool(project)


class TestFloodFill:

    def test_fills_empty_body(self, project, bucket):
        changed = bucket.flood_fill("body", 5, 5, RED)
        assert changed == CANVAS_SIZE * CANVAS_SIZE
        assert project.layers.read_pixel("body", 0, 0) == RED
        assert project.layers.read_pixel("body", 191, 191) == RED

    def test_begin_floors_position_and_uses_active_layer(self, project, bucket):
        project.session.active_layer = "hand"
        assert bucket.begin(pt(130.9, 70.2)) == 64 * 64
        assert project.layers.read_pixel("hand", 130, 70) == RED
        assert project.layers.read_pixel("body", 130, 70) == CLEAR

    def test_stays_inside_bounds(self, project, bucket):
        bucket.flood_fill("hand", 130, 70, RED)
        layers = project.layers
        assert layers.read_pixel("hand", 126, 63) == RED
        assert layers.read_pixel("hand", 189, 126) == RED
        assert layers.read_pixel("hand", 125, 70) == CLEAR
        assert layers.read_pixel("hand", 190, 70) == CLEAR
        assert layers.read_pixel("hand", 130, 62) == CLEAR
        assert layers.read_pixel("hand", 130, 127) == CLEAR

    def test_seed_outside_bounds_is_skipped(self, project, bucket):
        before = project.layers.pixels("hand")
        assert bucket.flood_fill("hand", 10, 10, RED) == 0
        assert project.layers.image("hand") == before

    def test_stops_at_other_colors(self, project, bucket):
        layers = project.layers
        for y in range(CANVAS_SIZE):
            layers.write_pixel("body", 50, y, BLUE)

        bucket.flood_fill("body", 10, 10, RED)
        assert layers.read_pixel("body", 10, 10) == RED
        assert layers.read_pixel("body", 49, 100) == RED
        assert layers.read_pixel("body", 50, 10) == BLUE
        assert layers.read_pixel("body", 60, 10) == CLEAR

    def test_eight_connected_crosses_diagonals(self, project, bucket):
        layers = project.layers
        bucket.flood_fill("hand", 130, 70, BLUE)
        layers.write_pixel("hand", 130, 70, CLEAR)
        layers.write_pixel("hand", 131, 71, CLEAR)

        assert bucket.flood_fill("hand", 130, 70, RED) == 2
        assert layers.read_pixel("hand", 131, 71) == RED

    def test_exact_rgba_match(self, project, bucket):
        layers = project.layers
        fill_layer(layers, "body", GREEN)
        layers.write_pixel("body", 20, 20, (0, 255, 0, 254))

        bucket.flood_fill("body", 0, 0, RED)
        assert layers.read_pixel("body", 20, 20) == (0, 255, 0, 254)
        assert layers.read_pixel("body", 21, 20) == RED

    def test_same_color_is_byte_identical(self, project, bucket):
        fill_layer(project.layers, "body", RED)
        project.layers.write_pixel("body", 3, 3, BLUE)
        before = project.layers.pixels("body")

        assert bucket.flood_fill("body", 50, 50, RED) == 0
        assert project.layers.image("body") == before

    def test_idempotent(self, project, bucket):
        layers = project.layers
        for x in range(CANVAS_SIZE):
            layers.write_pixel("body", x, 40, BLUE)

        bucket.flood_fill("body", 10, 10, RED)
        once = layers.pixels("body")
        bucket.flood_fill("body", 10, 10, RED)
        assert layers.image("body") == once
