"""
Artboard Toolkit - Constants and Configuration

This module contains all constant values used throughout the toolkit:
- Color matching tolerance
- Unmatched color report layout
- Default document settings
- Palette file schema keys
"""

# ======================================================================
# COLOR MATCHING
# ======================================================================
# Per-channel absolute difference must be strictly below this value.
# Channel scale is 0-255 for both representations.
COLOR_MATCH_TOLERANCE = 1.0

# Returned by palette matching when no entry matches
NO_MATCH = -1

# ======================================================================
# UNMATCHED COLOR REPORT
# ======================================================================
# Report is placed below the bottom-left corner of all canvases
UNMATCHED_REPORT_MARGIN = 20
UNMATCHED_REPORT_FONT_SIZE = 18
UNMATCHED_REPORT_HEADER = "Unconverted colors:"
UNMATCHED_ALERT_MESSAGE = "One or more colors don't match the brand palette and weren't converted."

# ======================================================================
# DOCUMENT DEFAULTS
# ======================================================================
# Letter size in points
DEFAULT_DOCUMENT_WIDTH = 612.0
DEFAULT_DOCUMENT_HEIGHT = 792.0
DEFAULT_UNITS = 'points'
DEFAULT_LAYER_NAME = 'Layer 1'
DEFAULT_OPACITY = 100.0
DEFAULT_TEXT_FONT_SIZE = 12.0

# ======================================================================
# PALETTE FILE SCHEMA
# ======================================================================
PALETTE_KEY_COLORS = 'colors'
PALETTE_KEY_NAME = 'name'
PALETTE_KEY_RGB = 'rgb'
PALETTE_KEY_CMYK = 'cmyk'
