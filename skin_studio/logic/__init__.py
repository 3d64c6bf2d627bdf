"""
Logic Package for Skin Studio

Contains data structures and the painting/compositing core:
- LayerStore: One raster per skin region
- HistoryManager: Bounded undo of whole-store snapshots
- EditorSession: Tool, brush and view state
- SkinProject: Ties the above together for one editing session

"""

from .layer import Layer, LayerStore
from .bounds import Bounds, get_bounds
from .history import HistoryManager
from .session import EditorSession, Tool
from .project import SkinProject

__all__ = ['Layer', 'LayerStore', 'Bounds', 'get_bounds', 'HistoryManager',
           'EditorSession', 'Tool', 'SkinProject']
