"""
Artboard Toolkit - Document Model

In-memory vector document: layers of page items plus a set of canvases.
This is the host model every toolkit operation works against. All state
lives here and is mutated in place; there is no undo or rollback.

Usage:
    app = Application()
    doc = app.add_document(DocumentPreset(color_mode=Representation.RGB))

    path = doc.add_path(left=10, top=-10, width=50, height=20,
                        fill_color=RGBColor(255, 0, 0))
    doc.canvases.add(canvas_region(100, 0, 200, 200))
"""

import logging
from typing import List, Optional

from models.color import Representation
from models.geometry import Point
from ._internal.item import PathItem, GroupItem, TextFrame, ElementPlacement
from ._internal.layer import Layer
from ._internal.canvas import Canvases
from .query_mixin import DocumentQueryMixin
from .selection_mixin import DocumentSelectionMixin
from constants import DEFAULT_UNITS, DEFAULT_LAYER_NAME, DEFAULT_TEXT_FONT_SIZE


class Document(DocumentQueryMixin, DocumentSelectionMixin):
    """Vector document with layers and canvases

    Properties:
        application: Owning Application (None for standalone documents)
        color_space: Representation of the document's colors
        ruler_units: Unit system name
        page_origin / ruler_origin: Origin points copied across duplication
        layers: Layers in order
        canvases: Canvases collection
    """

    def __init__(self, color_space: Representation = Representation.RGB, ruler_units: str = DEFAULT_UNITS,
                 application=None, name: str = "Untitled"):
        self._logger = logging.getLogger('Document')
        self.name = name
        self.application = application
        self.color_space = color_space
        self.ruler_units = ruler_units
        self.page_origin = Point(0.0, 0.0)
        self.ruler_origin = Point(0.0, 0.0)
        self.canvases = Canvases()
        self._layers: List[Layer] = []
        self._active_layer_index = 0
        self.add_layer(DEFAULT_LAYER_NAME)

        self._logger.debug(f"Created document {name!r} ({color_space.value}, {ruler_units})")

    # ========================================
    # Layers
    # ========================================

    @property
    def layers(self) -> List[Layer]:
        return list(self._layers)

    @property
    def active_layer(self) -> Layer:
        return self._layers[self._active_layer_index]

    def set_active_layer(self, layer: Layer):
        self._active_layer_index = self._layers.index(layer)

    def add_layer(self, name: str, locked: bool = False) -> Layer:
        layer = Layer(name, locked=locked)
        layer._parent = self
        self._layers.append(layer)
        return layer

    # ========================================
    # Item creation (on the active layer unless a layer is given)
    # ========================================

    def add_path(self, left: float = 0.0, top: float = 0.0, width: float = 0.0, height: float = 0.0,
                 fill_color=None, layer: Optional[Layer] = None, **kwargs) -> PathItem:
        item = PathItem(left, top, width, height, fill_color=fill_color, **kwargs)
        (layer or self.active_layer)._insert(item, ElementPlacement.PLACE_AT_END)
        return item

    def add_group(self, layer: Optional[Layer] = None) -> GroupItem:
        """New empty group at the beginning of the layer"""
        group = GroupItem()
        (layer or self.active_layer)._insert(group, ElementPlacement.PLACE_AT_BEGINNING)
        return group

    def add_text_frame(self, contents: str = "", left: float = 0.0, top: float = 0.0,
                       font_size: float = DEFAULT_TEXT_FONT_SIZE, layer: Optional[Layer] = None) -> TextFrame:
        frame = TextFrame(contents, left, top, font_size=font_size)
        (layer or self.active_layer)._insert(frame, ElementPlacement.PLACE_AT_BEGINNING)
        return frame

    def __repr__(self) -> str:
        return (f"Document(name={self.name!r}, color_space={self.color_space.value}, "
                f"canvases={len(self.canvases)}, layers={len(self._layers)})")
