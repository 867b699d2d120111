"""Palette configuration files

File format (JSON):

    {
        "colors": [
            {"name": "brand_red", "rgb": [255, 0, 0], "cmyk": [0, 100, 100, 0]},
            ...
        ]
    }
"""

import json
import logging
import os
from typing import Any, Dict

from constants import PALETTE_KEY_COLORS, PALETTE_KEY_NAME, PALETTE_KEY_RGB, PALETTE_KEY_CMYK
from models.errors import PaletteLengthMismatch
from models.palette import Palette
from services.palette import build_palette
from utils.logger import loggerRaise

_logger = logging.getLogger('PaletteLoader')


def palette_from_dict(data: Dict[str, Any]) -> Palette:
    """Build a palette from parsed palette configuration

    Raises:
        PaletteLengthMismatch: If an entry is missing its rgb or cmyk value
        ValueError: If the colors list is missing
    """
    if PALETTE_KEY_COLORS not in data:
        raise ValueError(f"Palette configuration needs a '{PALETTE_KEY_COLORS}' list")

    primaries, secondaries, names = [], [], []
    for i, entry in enumerate(data[PALETTE_KEY_COLORS]):
        if PALETTE_KEY_RGB not in entry or PALETTE_KEY_CMYK not in entry:
            raise PaletteLengthMismatch(f"Palette entry {i} needs both '{PALETTE_KEY_RGB}' and '{PALETTE_KEY_CMYK}'")
        primaries.append(entry[PALETTE_KEY_RGB])
        secondaries.append(entry[PALETTE_KEY_CMYK])
        names.append(entry.get(PALETTE_KEY_NAME, ""))

    return build_palette(primaries, secondaries, names)


def load_palette(path: str) -> Palette:
    """Load a palette from a JSON file"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        palette = palette_from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        loggerRaise(e, f"Error loading palette {os.path.basename(path)}")

    _logger.info(f"Loaded {len(palette)} palette colors from {path}")
    return palette


def save_palette(palette: Palette, path: str):
    """Write a palette in the format load_palette reads"""
    data = {
        PALETTE_KEY_COLORS: [
            {
                PALETTE_KEY_NAME: entry.name,
                PALETTE_KEY_RGB: list(entry.primary.channels()),
                PALETTE_KEY_CMYK: list(entry.secondary.channels()),
            }
            for entry in palette
        ]
    }
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
