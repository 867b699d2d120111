"""
Artboard Toolkit - Document Conversion

Duplicates a document into another color representation and recolors the
copies from a palette, keeping layout.

Ordering is load-bearing: palette indices are computed on the source
selection, and the duplicates are created in that same order, so
indices[i] describes new_items[i].
"""

import logging
from typing import List, Tuple

from models.color import Representation
from models.document import Document
from models.palette import Palette
from services.duplication import duplicate_document
from services.palette import match_items_to_palette, convert_to_palette
from services.selection import select_everything

_logger = logging.getLogger('Conversion')


def convert_document_to_palette(doc: Document, palette: Palette,
                                representation: Representation) -> Tuple[Document, List[str]]:
    """Copy doc into `representation`, mapping every fill through palette

    Fills are matched in the source document's own representation.

    Returns:
        (new document, sorted distinct unconverted colors)
    """
    items = select_everything(doc)
    indices = match_items_to_palette(items, palette, doc.color_space)

    new_doc = duplicate_document(doc, representation)
    new_items = new_doc.path_items
    unmatched = convert_to_palette(new_doc, new_items, palette, indices, representation)

    _logger.info(f"Converted {doc.name!r} to {representation.value} as {new_doc.name!r}")
    return new_doc, unmatched
