"""Internal implementation classes for the document model

Public API: import from models.document
"""

from .item import ElementPlacement, ItemContainer, PageItem, PathItem, TextFrame, GroupItem
from .layer import Layer
from .canvas import Canvas, Canvases

__all__ = [
    'ElementPlacement', 'ItemContainer', 'PageItem', 'PathItem', 'TextFrame', 'GroupItem',
    'Layer', 'Canvas', 'Canvases',
]
