"""
Artboard Toolkit - Movement Service

Absolute moves expressed through relative translation: the offset from the
current anchor to the destination is computed once and applied with
translate().
"""

import logging
from typing import Sequence

from models.capabilities import Positioned
from models.errors import EmptyCollection
from models.geometry import Point
from services.geometry import offset, find_top_left

_logger = logging.getLogger('Movement')


def translate_to(item: Positioned, destination: Point) -> Point:
    """Move item so its top-left anchor lands on destination

    Returns:
        The offset that was applied
    """
    delta = offset(destination, item.position)
    item.translate(delta.x, delta.y)
    _logger.debug(f"Translated {item!r} by ({delta.x:.4f}, {delta.y:.4f})")
    return delta


def translate_collection_to(collection: Sequence[Positioned], destination: Point) -> Point:
    """Move a collection as a rigid body so its top-left lands on destination

    One shared offset is measured up front and applied to every member;
    members are never re-measured, so their relative layout is unchanged.

    Returns:
        The offset that was applied

    Raises:
        EmptyCollection: If the collection is empty
    """
    top_left = find_top_left(collection)
    if top_left is None:
        raise EmptyCollection("Cannot translate an empty collection")

    delta = offset(destination, top_left)
    for item in collection:
        item.translate(delta.x, delta.y)

    _logger.debug(f"Translated {len(collection)} items by ({delta.x:.4f}, {delta.y:.4f})")
    return delta
