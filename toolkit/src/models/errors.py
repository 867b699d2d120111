"""Exception types raised by the toolkit and the document model."""


class ToolkitError(Exception):
    """Base class for all toolkit errors"""


class InvalidIndex(ToolkitError, IndexError):
    """Canvas or palette index out of range"""


class PaletteLengthMismatch(ToolkitError, ValueError):
    """Two sequences that must be index-aligned have different lengths"""


class EmptyCollection(ToolkitError, ValueError):
    """Operation needs at least one item or canvas"""


class DocumentStructureError(ToolkitError):
    """Operation would leave the document in an invalid structure

    Example: removing the last canvas of a document.
    """
