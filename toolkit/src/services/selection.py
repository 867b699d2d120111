"""
Artboard Toolkit - Selection Service

Selecting and clearing document content. Locked items, and items on
locked layers, are never selected or removed.
"""

import logging
from typing import List

from models.document import Document, PageItem, is_editable
from models.errors import InvalidIndex

_logger = logging.getLogger('Selection')


def select_everything(doc: Document) -> List[PageItem]:
    """Select every editable path item in the document

    Returns:
        The selected items, in document order
    """
    doc.selection = None
    for item in doc.path_items:
        if is_editable(item):
            item.selected = True
    selection = doc.selection
    _logger.debug(f"Selected {len(selection)} items in {doc.name!r}")
    return selection


def _check_canvas_index(doc: Document, index: int):
    if not 0 <= index < len(doc.canvases):
        raise InvalidIndex(f"There is no canvas with the index {index}")


def select_contents_on_canvas(doc: Document, index: int) -> List[PageItem]:
    """Select every editable item on the canvas at index

    Raises:
        InvalidIndex: If index is out of range
    """
    doc.selection = None
    _check_canvas_index(doc, index)
    doc.canvases.set_active_canvas_index(index)
    return doc.select_objects_on_active_canvas()


def clear_canvas(doc: Document, index: int) -> int:
    """Delete every editable item on the canvas at index

    Returns:
        Number of items removed

    Raises:
        InvalidIndex: If index is out of range
    """
    selection = select_contents_on_canvas(doc, index)
    for item in selection:
        item.remove()
    _logger.info(f"Cleared {len(selection)} items from canvas {index} of {doc.name!r}")
    return len(selection)
