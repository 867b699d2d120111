"""Text annotations placed directly in a document"""

import logging

from models.document import Document, TextFrame
from models.geometry import Point

_logger = logging.getLogger('Annotation')


def create_text_frame(doc: Document, message: str, position: Point, size: float) -> TextFrame:
    """Place point text with its top-left corner at position

    Args:
        doc: Target document
        message: Text contents (may span several lines)
        position: Top-left corner
        size: Font size in points
    """
    frame = doc.add_text_frame(message, font_size=size)
    frame.left = position.x
    frame.top = position.y
    _logger.debug(f"Added text frame at ({position.x:g}, {position.y:g}) in {doc.name!r}")
    return frame
