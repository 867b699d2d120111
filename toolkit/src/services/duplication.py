"""
Artboard Toolkit - Duplication Service

Copies canvases and content into a new document with a different color
representation while keeping the content's placement relative to the
canvases.

duplicate_document runs one pass, no retries:
1. Measure: canvas union top-left A and content top-left C in the source;
   layout offset = C - A.
2. Provision: new document (source units, target representation) with
   every source canvas recreated; the default canvas is then removed.
3. Duplicate: every selected item, in selection order.
4. Re-anchor: move the copies as one rigid body to A' + (C - A), where A'
   is the new document's canvas union top-left.

A failure part way leaves the new document as far as it got. There is no
rollback; treat it as inspect-or-discard.
"""

import logging
from typing import List, Sequence

from models.color import Representation
from models.document import Document, DocumentPreset, PageItem, ElementPlacement, Canvas
from models.errors import EmptyCollection
from services.geometry import offset, top_left_of, top_left_of_canvases
from services.movement import translate_collection_to
from services.selection import select_everything

_logger = logging.getLogger('Duplicator')


def new_document(source: Document, representation: Representation) -> Document:
    """Create a document with the source's units in the given representation

    Page and ruler origins are copied from the source.

    Raises:
        ValueError: If the source is not owned by an Application
    """
    if source.application is None:
        raise ValueError(f"Document {source.name!r} has no application to create documents in")
    preset = DocumentPreset(color_mode=representation, units=source.ruler_units)
    doc = source.application.add_document(preset)
    doc.page_origin = source.page_origin
    doc.ruler_origin = source.ruler_origin
    _logger.debug(f"Created {doc!r} from {source.name!r}")
    return doc


def duplicate_canvas_in_new_document(source: Document, canvas: Canvas, representation: Representation) -> Document:
    """New document holding a single copy of canvas"""
    doc = new_document(source, representation)
    doc.canvases.add(canvas.region, canvas.name)
    # The default canvas can only go once a real one exists
    doc.canvases.remove(0)
    return doc


def duplicate_canvases_in_new_document(source: Document, representation: Representation) -> Document:
    """New document holding copies of every source canvas, same order

    Raises:
        EmptyCollection: If the source has no canvases
    """
    if len(source.canvases) == 0:
        raise EmptyCollection(f"Document {source.name!r} has no canvases to duplicate")

    regions = [(canvas.region, canvas.name) for canvas in source.canvases]
    doc = new_document(source, representation)
    for region, name in regions:
        doc.canvases.add(region, name)
    doc.canvases.remove(0)
    _logger.debug(f"Duplicated {len(regions)} canvases into {doc.name!r}")
    return doc


def duplicate_selection_in_new_document(selection: Sequence[PageItem], dest: Document) -> List[PageItem]:
    """Duplicate items at the end of the destination's active layer

    Source items are deselected. Positions are copied as-is; placement
    relative to the destination canvases is NOT adjusted here.

    Returns:
        The new items, in the same order as selection
    """
    new_items = []
    for item in selection:
        item.selected = False
        new_items.append(item.duplicate(dest, ElementPlacement.PLACE_AT_END))
    return new_items


def duplicate_document(doc: Document, representation: Representation) -> Document:
    """Duplicate canvases and all editable content into a new document

    Locked items and items on locked layers are left out.

    Raises:
        EmptyCollection: If the source has no canvases
    """
    if len(doc.canvases) == 0:
        raise EmptyCollection(f"Document {doc.name!r} has no canvases to duplicate")

    selection = select_everything(doc)
    canvas_top_left = top_left_of_canvases(doc.canvases)
    layout_offset = None
    if selection:
        layout_offset = offset(top_left_of(selection), canvas_top_left)

    new_doc = duplicate_canvases_in_new_document(doc, representation)
    new_items = duplicate_selection_in_new_document(selection, new_doc)

    if layout_offset is not None:
        new_canvas_top_left = top_left_of_canvases(new_doc.canvases)
        translate_collection_to(new_items, new_canvas_top_left + layout_offset)

    _logger.info(f"Duplicated {doc.name!r} as {new_doc.name!r} ({representation.value}, {len(new_items)} items)")
    return new_doc
