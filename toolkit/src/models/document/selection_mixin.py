"""
Selection Mixin for Document Model

Selection state lives on the items (item.selected). The document exposes it
as a list and provides the host-level "select on active canvas" primitive.
"""

from typing import List, Optional, Sequence

from models.capabilities import Lockable
from ._internal.item import PageItem, ItemContainer


def is_editable(item: Lockable) -> bool:
    """True if neither the item nor its layer is locked"""
    layer = item.layer
    return not item.locked and not (layer is not None and layer.locked)


class DocumentSelectionMixin:
    """Mixin providing selection for Document

    This mixin assumes the class has:
    - self._layers: List[Layer]
    - self.canvases: Canvases
    - self._walk_items(): depth-first item traversal
    """

    @property
    def selection(self) -> List[PageItem]:
        """Selected items, outermost first

        Children of a selected group are not listed separately.
        """
        selected = []

        def visit(container):
            for item in container._page_items:
                if item.selected:
                    selected.append(item)
                elif isinstance(item, ItemContainer):
                    visit(item)

        for layer in self._layers:
            visit(layer)
        return selected

    @selection.setter
    def selection(self, items: Optional[Sequence[PageItem]]):
        """Replace the selection; None or [] clears it"""
        for item in self._walk_items():
            item.selected = False
        for item in items or ():
            item.selected = True

    def select_objects_on_active_canvas(self) -> List[PageItem]:
        """Select every editable top-level item touching the active canvas"""
        region = self.canvases.get_active().region
        for layer in self._layers:
            for item in layer._page_items:
                if is_editable(item) and region.intersects(item.bounds):
                    item.selected = True
        return self.selection
