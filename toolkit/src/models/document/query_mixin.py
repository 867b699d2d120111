"""
Query Mixin for Document Model

Read-only traversal of a document's items.

All query methods follow these conventions:
- Return new lists (mutating them never changes the document)
- Traverse layers in order, items in stacking order, groups depth-first
"""

from typing import List, Optional

from ._internal.item import PageItem, PathItem, GroupItem, TextFrame
from ._internal.layer import Layer


class DocumentQueryMixin:
    """Mixin providing item queries for Document

    This mixin assumes the class has:
    - self._layers: List[Layer]
    """

    def _walk_items(self):
        for layer in self._layers:
            yield from layer._walk()

    @property
    def page_items(self) -> List[PageItem]:
        """Every item in the document, nested ones included"""
        return list(self._walk_items())

    @property
    def path_items(self) -> List[PathItem]:
        """Every path item, including paths nested in groups"""
        return [item for item in self._walk_items() if isinstance(item, PathItem)]

    @property
    def group_items(self) -> List[GroupItem]:
        return [item for item in self._walk_items() if isinstance(item, GroupItem)]

    @property
    def text_frames(self) -> List[TextFrame]:
        return [item for item in self._walk_items() if isinstance(item, TextFrame)]

    def get_layer_by_name(self, name: str) -> Optional[Layer]:
        for layer in self._layers:
            if layer.name == name:
                return layer
        return None
