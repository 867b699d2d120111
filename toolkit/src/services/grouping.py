"""
Artboard Toolkit - Grouping Service

Groups here are scaffolding, not document structure: they exist to measure
or move a set of items through group-level position only, and must be
dissolved again afterwards. temporary_group guarantees that on every exit
path.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Sequence

from models.document import Document, GroupItem, PageItem, ElementPlacement
from models.errors import EmptyCollection
from models.geometry import Point

_logger = logging.getLogger('Grouping')


def group(doc: Document, items: Sequence[PageItem]) -> GroupItem:
    """Create a group on the active layer and move items into it

    Each item is moved to the beginning of the group, so the group's
    stacking order is the reverse of `items`.
    """
    new_group = doc.add_group()
    for item in items:
        item.move_to_beginning(new_group)
    _logger.debug(f"Grouped {len(items)} items")
    return new_group


def ungroup_once(group_item: GroupItem) -> List[PageItem]:
    """Move every child to the end of the group's layer (no recursion)

    Returns:
        The released items
    """
    layer = group_item.layer
    released = []
    children = group_item.page_items
    for child in reversed(children):
        child.move(layer, ElementPlacement.PLACE_AT_END)
        released.append(child)
    _logger.debug(f"Ungrouped {len(released)} items onto {layer!r}")
    return released


@contextmanager
def temporary_group(doc: Document, items: Sequence[PageItem]) -> Iterator[GroupItem]:
    """Group items for the duration of the block

    On exit, normal or not, the group is removed and each item goes back to
    the container it came from at its original stacking index. Items that
    were never moved in, or were moved elsewhere inside the block, are left
    where they are.
    """
    origins = [(item, item.parent, item.parent.index_of(item)) for item in items if item.parent is not None]
    scaffold = doc.add_group()
    try:
        for item in items:
            item.move_to_beginning(scaffold)
        _logger.debug(f"Grouped {len(items)} items")
        yield scaffold
    finally:
        scaffold.remove()
        # Ascending index per container puts every sibling back in its slot
        for item, parent, index in sorted(origins, key=lambda origin: origin[2]):
            if item.parent is scaffold:
                item.move_to_index(parent, index)
        _logger.debug(f"Released temporary group of {len(origins)} items")


def top_left_via_group(doc: Document, items: Sequence[PageItem]) -> Point:
    """Top-left of items measured through a temporary group

    For hosts that only report position at group level.

    Raises:
        EmptyCollection: If items is empty (an empty group has no position)
    """
    if not items:
        raise EmptyCollection("Cannot measure an empty collection through a group")
    with temporary_group(doc, items) as scaffold:
        return scaffold.position
