from PyQt6.QtCore import QObject


class BaseTool(QObject):
    """
    A tool edits the project's active layer in canvas coordinates.
    The canvas owns the gesture (snapshot, idle/dragging); tools only paint.
    """
    def __init__(self, project):
        super().__init__()
        self.project = project

    def begin(self, pos): pass
    def drag(self, pos): return False
    def end(self): pass

    # Tools that act once on press (bucket) finish inside begin()
    def is_drag_tool(self): return True
