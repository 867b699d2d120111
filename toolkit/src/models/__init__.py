"""
Artboard Toolkit - Data Models

Geometry, colors, palettes and the in-memory document model.

Public API: import Application, Document from models.document
The models/document/_internal/ subdirectory contains internal implementation only.
"""

from .geometry import Point, CanvasRegion
from .color import Representation, RGBColor, CMYKColor
from .palette import Palette, PaletteEntry

__all__ = ['Point', 'CanvasRegion', 'Representation', 'RGBColor', 'CMYKColor', 'Palette', 'PaletteEntry']
