"""Layer class - named, lockable item container owned by a document"""

from typing import Optional

from .item import ItemContainer


class Layer(ItemContainer):
    """Top-level container of page items

    Properties:
        name: Layer name
        locked: Lock flag; items on a locked layer are skipped by every
            toolkit operation
        parent: Owning document
    """

    def __init__(self, name: str, locked: bool = False):
        self.name = name
        self.locked = bool(locked)
        self._parent = None
        self._init_container()

    @property
    def parent(self) -> Optional[object]:
        return self._parent

    def __repr__(self) -> str:
        return f"Layer(name={self.name!r}, items={len(self._page_items)}, locked={self.locked})"
