from .base import BaseTool
from .brush import BrushTool
from .bucket import BucketTool

__all__ = ['BaseTool', 'BrushTool', 'BucketTool']
