"""
Artboard Toolkit - Palette Service

Matching fill colors against a dual-representation palette and converting
items to palette colors.

Matching is a per-channel tolerance test: two colors match when EVERY
channel of the chosen representation differs by strictly less than
COLOR_MATCH_TOLERANCE. Conversion round-trips in the host introduce small
per-channel rounding, which this absorbs.

Typical pipeline (indices must be computed on the same, unmodified item
sequence that is later converted):

    indices = match_items_to_palette(items, palette, Representation.RGB)
    new_doc = duplicate_document(doc, Representation.CMYK)
    convert_to_palette(new_doc, new_doc.path_items, palette, indices, Representation.CMYK)
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from constants import (
    COLOR_MATCH_TOLERANCE, NO_MATCH,
    UNMATCHED_REPORT_MARGIN, UNMATCHED_REPORT_FONT_SIZE,
    UNMATCHED_REPORT_HEADER, UNMATCHED_ALERT_MESSAGE,
)
from models.capabilities import Fillable
from models.color import RGBColor, CMYKColor, Representation, AnyColor, format_channels
from models.document import Document, is_editable
from models.errors import PaletteLengthMismatch
from models.geometry import Point
from models.palette import Palette, PaletteEntry
from services.annotation import create_text_frame
from services.geometry import bottom_left_of_canvases
from utils.logger import alert

_logger = logging.getLogger('Palette')


# ========================================
# Palette construction
# ========================================

def build_palette(primaries: Sequence[Sequence[float]], secondaries: Sequence[Sequence[float]],
                  names: Optional[Sequence[str]] = None) -> Palette:
    """Zip raw RGB and CMYK channel lists into a Palette

    Args:
        primaries: [[r, g, b], ...] on a 0-255 scale
        secondaries: [[c, m, y, k], ...] on a 0-255 scale, same length
        names: Optional entry names, same length

    Raises:
        PaletteLengthMismatch: If the sequences differ in length
        ValueError: If a color has the wrong number of channels
    """
    if len(primaries) != len(secondaries):
        raise PaletteLengthMismatch(
            f"Palette needs one CMYK value per RGB value: {len(primaries)} RGB, {len(secondaries)} CMYK"
        )
    if names is not None and len(names) != len(primaries):
        raise PaletteLengthMismatch(f"Palette has {len(primaries)} colors but {len(names)} names")

    entries = []
    for i, (rgb, cmyk) in enumerate(zip(primaries, secondaries)):
        entries.append(PaletteEntry(
            primary=RGBColor.from_channels(rgb),
            secondary=CMYKColor.from_channels(cmyk),
            name=names[i] if names is not None else "",
        ))
    _logger.debug(f"Built palette with {len(entries)} entries")
    return Palette(entries)


# ========================================
# Matching
# ========================================

def _channels(color: AnyColor, representation: Representation) -> Optional[np.ndarray]:
    """Channel vector of color in representation, None if it is not that kind of color"""
    if color is None or getattr(color, 'representation', None) is not representation:
        return None
    return np.asarray(color.channels(), dtype=float)


def colors_match(color1: AnyColor, color2: AnyColor, representation: Representation) -> bool:
    """True if every channel differs by less than the tolerance

    Colors that are not both in `representation` never match.
    """
    a = _channels(color1, representation)
    b = _channels(color2, representation)
    if a is None or b is None:
        return False
    return bool(np.all(np.abs(a - b) < COLOR_MATCH_TOLERANCE))


def match_to_palette(color: AnyColor, palette: Palette, representation: Representation) -> int:
    """Index of the first palette entry matching color, or NO_MATCH (-1)

    Entries are scanned in palette order; the first match wins.
    """
    channels = _channels(color, representation)
    if channels is None or len(palette) == 0:
        return NO_MATCH

    table = np.array([c.channels() for c in palette.colors(representation)], dtype=float)
    hits = np.flatnonzero(np.all(np.abs(table - channels) < COLOR_MATCH_TOLERANCE, axis=1))
    return int(hits[0]) if hits.size else NO_MATCH


def match_items_to_palette(items: Sequence[Fillable], palette: Palette, representation: Representation) -> List[int]:
    """Palette index (or NO_MATCH) for each item's fill, index-aligned with items"""
    indices = [match_to_palette(item.fill_color, palette, representation) for item in items]
    _logger.debug(f"Matched {sum(i != NO_MATCH for i in indices)}/{len(items)} items to palette")
    return indices


# ========================================
# Conversion
# ========================================

def convert_matched_items_to_color(items: Sequence[Fillable], start_color: AnyColor, end_color: AnyColor,
                                   representation: Representation) -> int:
    """Recolor every editable item whose fill matches start_color

    Locked items are skipped silently.

    Returns:
        Number of items recolored
    """
    converted = 0
    for item in items:
        if colors_match(item.fill_color, start_color, representation) and is_editable(item):
            item.fill_color = end_color.copy()
            converted += 1
    _logger.debug(f"Converted {converted} items from {start_color!r} to {end_color!r}")
    return converted


def convert_all_to_color(items: Sequence[Fillable], end_color: AnyColor, opacity: float) -> int:
    """Set fill and opacity (percent) on every editable item

    Returns:
        Number of items recolored
    """
    converted = 0
    for item in items:
        if is_editable(item):
            item.fill_color = end_color.copy()
            item.opacity = float(opacity)
            converted += 1
    _logger.debug(f"Converted {converted} items to {end_color!r} at {opacity}% opacity")
    return converted


def unique_elements(values: Sequence[str]) -> List[str]:
    """Sorted copy of values with duplicates collapsed"""
    if not values:
        return []
    ordered = sorted(values)
    unique = [ordered[0]]
    for value in ordered[1:]:
        if value != unique[-1]:
            unique.append(value)
    return unique


def convert_to_palette(doc: Document, items: Sequence[Fillable], palette: Palette, indices: Sequence[int],
                       representation: Representation) -> List[str]:
    """Set each item's fill to its precomputed palette entry

    indices[i] is the palette index for items[i] (from match_items_to_palette
    on the same sequence). Items whose index is out of range keep their
    color and are reported: after the pass the user is alerted and a text
    report listing the distinct unconverted colors is placed below the
    bottom-left corner of the document's canvases.

    Returns:
        Sorted, distinct unconverted colors as "(r, g, b)" strings

    Raises:
        PaletteLengthMismatch: If items and indices differ in length
    """
    if len(items) != len(indices):
        raise PaletteLengthMismatch(f"Got {len(indices)} palette indices for {len(items)} items")

    unmatched = []
    converted = 0
    for item, index in zip(items, indices):
        if palette.has_index(index):
            item.fill_color = palette.color_at(index, representation).copy()
            converted += 1
        else:
            unmatched.append(format_channels(item.fill_color))

    if not unmatched:
        _logger.info(f"Converted {len(items)} items to palette ({representation.value})")
        return []

    alert(UNMATCHED_ALERT_MESSAGE)
    unmatched = unique_elements(unmatched)
    report = "\n".join([UNMATCHED_REPORT_HEADER] + unmatched)

    corner = bottom_left_of_canvases(doc.canvases)
    position = Point(corner.x, corner.y - UNMATCHED_REPORT_MARGIN)
    create_text_frame(doc, report, position, UNMATCHED_REPORT_FONT_SIZE)

    _logger.info(f"Converted {converted} items; {len(unmatched)} distinct colors unmatched")
    return unmatched
