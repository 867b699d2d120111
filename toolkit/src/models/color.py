"""
Artboard Toolkit - Color Domain Model

Fill colors in the two supported representations:
- RGBColor: 3-channel additive (Representation.RGB)
- CMYKColor: 4-channel subtractive (Representation.CMYK)

Channels are floats on a 0-255 scale. Values are NOT rounded or clamped on
construction: color conversion round-trips in the host leave small
fractional drift, and tolerance matching depends on seeing it.
"""

from enum import Enum
from typing import Tuple, Optional, Union


class Representation(Enum):
    """Color representation of a document or a palette lookup"""
    RGB = 'rgb'
    CMYK = 'cmyk'

    @property
    def channel_count(self) -> int:
        """Number of channels compared when matching in this representation"""
        return 3 if self is Representation.RGB else 4


class RGBColor:
    """3-channel additive color (0-255 per channel)."""

    representation = Representation.RGB

    def __init__(self, red: float = 0.0, green: float = 0.0, blue: float = 0.0):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)

    # ========================================
    # Output Methods
    # ========================================

    def channels(self) -> Tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def to_rgb(self) -> 'RGBColor':
        return self.copy()

    def to_hex(self) -> str:
        """Convert to hex color string: #RRGGBB (channels rounded)."""
        r, g, b = (max(0, min(255, int(round(c)))) for c in self.channels())
        return f"#{r:02X}{g:02X}{b:02X}"

    def copy(self) -> 'RGBColor':
        return RGBColor(self.red, self.green, self.blue)

    # ========================================
    # Static Factory Methods
    # ========================================

    @staticmethod
    def from_channels(channels) -> 'RGBColor':
        """Create from a [r, g, b] sequence.

        Raises:
            ValueError: If the sequence does not have exactly 3 values
        """
        if len(channels) != 3:
            raise ValueError(f"RGB color needs 3 channels, got {len(channels)}")
        return RGBColor(*channels)

    @staticmethod
    def from_hex(hex_string: str) -> Optional['RGBColor']:
        """Create from hex string #RRGGBB or RRGGBB.

        Returns:
            RGBColor if parse succeeds, None otherwise
        """
        if not isinstance(hex_string, str):
            return None

        hex_string = hex_string.lstrip('#')
        if len(hex_string) != 6:
            return None

        try:
            return RGBColor(
                int(hex_string[0:2], 16),
                int(hex_string[2:4], 16),
                int(hex_string[4:6], 16),
            )
        except ValueError:
            return None

    # ========================================
    # Equality
    # ========================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, RGBColor):
            return False
        return self.channels() == other.channels()

    def __hash__(self) -> int:
        return hash(self.channels())

    def __repr__(self) -> str:
        return f"RGBColor({self.red:g}, {self.green:g}, {self.blue:g})"


class CMYKColor:
    """4-channel subtractive color (0-255 per channel)."""

    representation = Representation.CMYK

    def __init__(self, cyan: float = 0.0, magenta: float = 0.0, yellow: float = 0.0, black: float = 0.0):
        self.cyan = float(cyan)
        self.magenta = float(magenta)
        self.yellow = float(yellow)
        self.black = float(black)

    def channels(self) -> Tuple[float, float, float, float]:
        return (self.cyan, self.magenta, self.yellow, self.black)

    def to_rgb(self) -> RGBColor:
        """Naive subtractive-to-additive conversion.

        Only used to describe a CMYK fill in RGB terms for reports. Palette
        conversion never derives one representation from the other.
        """
        k = 1.0 - self.black / 255.0
        return RGBColor(
            255.0 * (1.0 - self.cyan / 255.0) * k,
            255.0 * (1.0 - self.magenta / 255.0) * k,
            255.0 * (1.0 - self.yellow / 255.0) * k,
        )

    def copy(self) -> 'CMYKColor':
        return CMYKColor(self.cyan, self.magenta, self.yellow, self.black)

    @staticmethod
    def from_channels(channels) -> 'CMYKColor':
        """Create from a [c, m, y, k] sequence.

        Raises:
            ValueError: If the sequence does not have exactly 4 values
        """
        if len(channels) != 4:
            raise ValueError(f"CMYK color needs 4 channels, got {len(channels)}")
        return CMYKColor(*channels)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CMYKColor):
            return False
        return self.channels() == other.channels()

    def __hash__(self) -> int:
        return hash(self.channels())

    def __repr__(self) -> str:
        return f"CMYKColor({self.cyan:g}, {self.magenta:g}, {self.yellow:g}, {self.black:g})"


AnyColor = Union[RGBColor, CMYKColor]


def _format_channel(value: float) -> str:
    # Whole numbers print without a trailing .0
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_channels(color: Optional[AnyColor]) -> str:
    """Human readable primary-representation tuple: "(r, g, b)".

    CMYK fills are described by their naive RGB equivalent so every line of
    a report has the same shape. Items without a fill read "(none)".
    """
    if color is None:
        return "(none)"
    rgb = color.to_rgb()
    return "(" + ", ".join(_format_channel(c) for c in rgb.channels()) + ")"
