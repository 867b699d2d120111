"""Page items - drawable objects held by layers and groups"""

import logging
from enum import Enum
from typing import List, Optional

from constants import DEFAULT_OPACITY, DEFAULT_TEXT_FONT_SIZE
from models.geometry import Point, CanvasRegion


class ElementPlacement(Enum):
    """Where a moved or duplicated item lands inside its new container"""
    PLACE_AT_BEGINNING = 'beginning'
    PLACE_AT_END = 'end'


class ItemContainer:
    """Mixin for objects that hold page items (layers and groups)

    Index 0 is the beginning (top of the stacking order).
    """

    def _init_container(self):
        self._page_items: List['PageItem'] = []

    @property
    def page_items(self) -> List['PageItem']:
        """Direct children (copy of the internal list)"""
        return list(self._page_items)

    def _insert(self, item: 'PageItem', placement: ElementPlacement):
        if placement is ElementPlacement.PLACE_AT_BEGINNING:
            self._page_items.insert(0, item)
        else:
            self._page_items.append(item)
        item._parent = self

    def _insert_at(self, item: 'PageItem', index: int):
        self._page_items.insert(index, item)
        item._parent = self

    def index_of(self, item: 'PageItem') -> int:
        """Stacking index of a direct child"""
        return self._page_items.index(item)

    def _detach(self, item: 'PageItem'):
        self._page_items.remove(item)
        item._parent = None

    def _walk(self):
        """Depth-first traversal of every nested item, in stacking order"""
        for item in self._page_items:
            yield item
            if isinstance(item, ItemContainer):
                yield from item._walk()


class PageItem:
    """Base drawable item

    Geometry is stored as the top-left anchor (y up) plus a size, so the
    item's bounds are [left, top, left + width, top - height].

    Properties:
        position: Top-left anchor as Point
        fill_color: RGBColor, CMYKColor or None
        opacity: Percent opacity (0-100)
        locked: Item lock flag
        layer: Containing layer (walks up through groups)
    """

    _logger = logging.getLogger('PageItem')

    def __init__(self, left: float = 0.0, top: float = 0.0, width: float = 0.0, height: float = 0.0,
                 fill_color=None, opacity: float = DEFAULT_OPACITY, locked: bool = False, name: str = ""):
        self._left = float(left)
        self._top = float(top)
        self._width = float(width)
        self._height = float(height)
        self.fill_color = fill_color
        self.opacity = float(opacity)
        self.locked = bool(locked)
        self.name = name
        self.selected = False
        self._parent: Optional[ItemContainer] = None

    # ========================================
    # Hierarchy
    # ========================================

    @property
    def parent(self) -> Optional[ItemContainer]:
        return self._parent

    @property
    def layer(self):
        """Layer holding this item, directly or through groups"""
        from .layer import Layer
        node = self._parent
        while node is not None and not isinstance(node, Layer):
            node = node._parent
        return node

    @property
    def document(self):
        layer = self.layer
        return layer.parent if layer is not None else None

    # ========================================
    # Geometry
    # ========================================

    @property
    def position(self) -> Point:
        """Top-left anchor"""
        return Point(self._left, self._top)

    @position.setter
    def position(self, value: Point):
        self.translate(value.x - self._left, value.y - self._top)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def bounds(self) -> CanvasRegion:
        return CanvasRegion(self._left, self._top, self._left + self.width, self._top - self.height)

    def translate(self, dx: float, dy: float):
        """Move by a relative offset"""
        self._left += dx
        self._top += dy

    # ========================================
    # Structure operations
    # ========================================

    def move(self, target: ItemContainer, placement: ElementPlacement = ElementPlacement.PLACE_AT_END):
        """Re-parent into target (layer or group), keeping geometry"""
        if self._parent is not None:
            self._parent._detach(self)
        target._insert(self, placement)

    def move_to_beginning(self, target: ItemContainer):
        self.move(target, ElementPlacement.PLACE_AT_BEGINNING)

    def move_to_index(self, target: ItemContainer, index: int):
        """Re-parent into target at a given stacking index"""
        if self._parent is not None:
            self._parent._detach(self)
        target._insert_at(self, index)

    def duplicate(self, target=None, placement: ElementPlacement = ElementPlacement.PLACE_AT_END) -> 'PageItem':
        """Deep copy into target

        Args:
            target: Document (its active layer), layer or group. None
                duplicates next to the original.
            placement: Position inside the target container

        Returns:
            The new item
        """
        container = target
        if container is None:
            container = self._parent
        elif not isinstance(container, ItemContainer):
            # Documents receive duplicates on their active layer
            container = container.active_layer
        if container is None:
            raise ValueError("Cannot duplicate a detached item without a target")

        copy = self._clone()
        container._insert(copy, placement)
        self._logger.debug(f"Duplicated {self!r} into {container!r} ({placement.value})")
        return copy

    def remove(self):
        if self._parent is not None:
            self._parent._detach(self)

    def _clone(self) -> 'PageItem':
        copy = self.__class__.__new__(self.__class__)
        PageItem.__init__(
            copy, self._left, self._top, self._width, self._height,
            fill_color=self.fill_color.copy() if self.fill_color is not None else None,
            opacity=self.opacity, locked=self.locked, name=self.name,
        )
        return copy

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, position=({self._left:g}, {self._top:g}))"


class PathItem(PageItem):
    """Filled vector path"""


class TextFrame(PageItem):
    """Point text: contents anchored at its top-left"""

    def __init__(self, contents: str = "", left: float = 0.0, top: float = 0.0,
                 font_size: float = DEFAULT_TEXT_FONT_SIZE, **kwargs):
        super().__init__(left, top, **kwargs)
        self.contents = contents
        self.font_size = float(font_size)

    @property
    def left(self) -> float:
        return self._left

    @left.setter
    def left(self, value: float):
        self._left = float(value)

    @property
    def top(self) -> float:
        return self._top

    @top.setter
    def top(self, value: float):
        self._top = float(value)

    @property
    def height(self) -> float:
        # One line per row of contents
        return self.font_size * max(1, len(self.contents.splitlines()))

    def _clone(self) -> 'TextFrame':
        copy = super()._clone()
        copy.contents = self.contents
        copy.font_size = self.font_size
        return copy


class GroupItem(PageItem, ItemContainer):
    """Container item

    Position and size are derived from the children: the anchor is the
    leftmost x and topmost y over all child anchors. Translating a group
    translates every child.
    """

    def __init__(self, name: str = "", locked: bool = False):
        super().__init__(name=name, locked=locked)
        self._init_container()

    @property
    def position(self) -> Point:
        if not self._page_items:
            return Point(0.0, 0.0)
        return Point(
            min(child.position.x for child in self._page_items),
            max(child.position.y for child in self._page_items),
        )

    @position.setter
    def position(self, value: Point):
        current = self.position
        self.translate(value.x - current.x, value.y - current.y)

    @property
    def bounds(self) -> CanvasRegion:
        if not self._page_items:
            return CanvasRegion(0.0, 0.0, 0.0, 0.0)
        child_bounds = [child.bounds for child in self._page_items]
        return CanvasRegion(
            min(b.left for b in child_bounds),
            max(b.top for b in child_bounds),
            max(b.right for b in child_bounds),
            min(b.bottom for b in child_bounds),
        )

    @property
    def width(self) -> float:
        return self.bounds.width

    @property
    def height(self) -> float:
        return self.bounds.height

    def translate(self, dx: float, dy: float):
        for child in self._page_items:
            child.translate(dx, dy)

    def _clone(self) -> 'GroupItem':
        copy = GroupItem(name=self.name, locked=self.locked)
        copy.opacity = self.opacity
        for child in self._page_items:
            copy._insert(child._clone(), ElementPlacement.PLACE_AT_END)
        return copy
