"""
Tests for the canvas input controller.

Covers:
- Screen -> canvas coordinate mapping
- idle/dragging gesture state machine
- One snapshot per user action
- Undo through the controller and Ctrl+Z
"""
import pytest
from PyQt6.QtCore import Qt, QPoint, QPointF

from skin_studio.logic.session import Tool
from skin_studio.ui.canvas import Canvas

from conftest import RED, CLEAR, pt


@pytest.fixture
def canvas(project, qtbot):
    widget = Canvas(project)
    qtbot.addWidget(widget)
    widget.resize(384, 384)
    return widget


class TestMapping:

    def test_scale_by_raster_over_display_size(self, canvas):
        assert canvas.scale_factor == 2
        p = canvas.map_to_canvas(QPointF(192, 192))
        assert (p.x(), p.y()) == (96, 96)

    def test_letterboxed_widget(self, canvas):
        canvas.resize(584, 384)  # 100px margin left and right
        p = canvas.map_to_canvas(QPointF(100, 0))
        assert (p.x(), p.y()) == (0, 0)
        p = canvas.map_to_canvas(QPointF(484, 384))
        assert (p.x(), p.y()) == (192, 192)


class TestGestures:

    def test_pen_press_enters_dragging(self, canvas, project):
        canvas.pointer_down(pt(96, 96))
        assert canvas.state == Canvas.DRAGGING
        assert len(project.history) == 1

    def test_move_paints_only_while_dragging(self, canvas, project):
        canvas.pointer_move(pt(96, 96))
        assert project.layers.read_pixel("body", 96, 96) == CLEAR

        canvas.pointer_down(pt(96, 96))
        canvas.pointer_move(pt(96, 96))
        assert project.layers.read_pixel("body", 96, 96) == RED

        canvas.pointer_up()
        assert canvas.state == Canvas.IDLE
        canvas.pointer_move(pt(20, 20))
        assert project.layers.read_pixel("body", 20, 20) == CLEAR

    def test_one_snapshot_per_stroke(self, canvas, project):
        canvas.pointer_down(pt(40, 40))
        for x in range(40, 120, 10):
            canvas.pointer_move(pt(x, 40))
        canvas.pointer_up()
        assert len(project.history) == 1

        canvas.undo()
        assert project.layers.read_pixel("body", 80, 40) == CLEAR

    def test_bucket_fills_on_press_and_stays_idle(self, canvas, project):
        project.session.set_tool(Tool.BUCKET.value)
        canvas.pointer_down(pt(10, 10))
        assert canvas.state == Canvas.IDLE
        assert len(project.history) == 1
        assert project.layers.read_pixel("body", 150, 150) == RED

    def test_bucket_noop_still_snapshots(self, canvas, project):
        project.session.set_tool(Tool.BUCKET.value)
        project.session.active_layer = "hand"
        canvas.pointer_down(pt(10, 10))  # outside hand bounds
        assert len(project.history) == 1
        assert project.layers.read_pixel("hand", 10, 10) == CLEAR

    def test_eraser_stroke(self, canvas, project):
        project.session.set_tool(Tool.BUCKET.value)
        canvas.pointer_down(pt(10, 10))
        project.session.set_tool(Tool.ERASER.value)
        canvas.pointer_down(pt(96, 96))
        canvas.pointer_move(pt(96, 96))
        canvas.pointer_up()
        assert project.layers.read_pixel("body", 96, 96) == CLEAR
        assert project.layers.read_pixel("body", 10, 10) == RED

        canvas.undo()
        assert project.layers.read_pixel("body", 96, 96) == RED

    def test_undo_on_empty_history(self, canvas, project):
        canvas.undo()
        assert project.layers.read_pixel("body", 0, 0) == CLEAR

    def test_refresh_emits_changed(self, canvas, qtbot):
        with qtbot.waitSignal(canvas.changed, timeout=1000):
            canvas.pointer_down(pt(96, 96))


class TestQtEvents:

    def test_mouse_click_with_bucket(self, canvas, project, qtbot):
        project.session.set_tool(Tool.BUCKET.value)
        canvas.show()
        qtbot.waitExposed(canvas)
        qtbot.mouseClick(canvas, Qt.MouseButton.LeftButton, pos=QPoint(200, 200))
        assert project.layers.read_pixel("body", 100, 100) == RED
        assert canvas.state == Canvas.IDLE

    def test_ctrl_z_undoes(self, canvas, project, qtbot):
        project.session.set_tool(Tool.BUCKET.value)
        canvas.pointer_down(pt(10, 10))
        qtbot.keyClick(canvas, Qt.Key.Key_Z, Qt.KeyboardModifier.ControlModifier)
        assert project.layers.read_pixel("body", 10, 10) == CLEAR

    def test_tool_hotkeys(self, canvas, qtbot):
        with qtbot.waitSignal(canvas.tool_shortcut) as blocker:
            qtbot.keyClick(canvas, Qt.Key.Key_G)
        assert blocker.args == ["bucket"]

    def test_brush_size_hotkeys(self, canvas, qtbot):
        with qtbot.waitSignal(canvas.brush_size_shortcut) as blocker:
            qtbot.keyClick(canvas, Qt.Key.Key_BracketRight)
        assert blocker.args == [18]
