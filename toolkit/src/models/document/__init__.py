"""Document model package

Public API: import Application, Document and item classes from here.
The _internal/ subdirectory contains implementation only.
"""

from .core import Document
from .application import Application, DocumentPreset
from .query_mixin import DocumentQueryMixin
from .selection_mixin import DocumentSelectionMixin, is_editable
from ._internal import (
    ElementPlacement, ItemContainer, PageItem, PathItem, TextFrame, GroupItem,
    Layer, Canvas, Canvases,
)

__all__ = [
    'Application',
    'Document',
    'DocumentPreset',
    'DocumentQueryMixin',
    'DocumentSelectionMixin',
    'is_editable',
    'ElementPlacement',
    'ItemContainer',
    'PageItem',
    'PathItem',
    'TextFrame',
    'GroupItem',
    'Layer',
    'Canvas',
    'Canvases',
]
