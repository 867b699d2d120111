"""
Artboard Toolkit - Palette Domain Model

A palette is an ordered list of entries, each holding the SAME perceptual
color in both representations. The two values are supplied by the caller,
never derived from one another.

Index position is the contract between matching and conversion: an index
returned by matching against a palette is only meaningful for that palette.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence

from models.color import RGBColor, CMYKColor, Representation, AnyColor
from models.errors import InvalidIndex


@dataclass
class PaletteEntry:
    """One palette color in both representations"""
    primary: RGBColor
    secondary: CMYKColor
    name: str = ""

    def color_for(self, representation: Representation) -> AnyColor:
        """Entry value in the requested representation"""
        if representation is Representation.RGB:
            return self.primary
        return self.secondary


class Palette:
    """Ordered, immutable sequence of PaletteEntry"""

    def __init__(self, entries: Sequence[PaletteEntry] = ()):
        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> PaletteEntry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"Palette({len(self._entries)} entries)"

    def has_index(self, index: int) -> bool:
        """True if index addresses an entry (negative indices never do)"""
        return 0 <= index < len(self._entries)

    def color_at(self, index: int, representation: Representation) -> AnyColor:
        """Color of entry `index` in `representation`

        Raises:
            InvalidIndex: If index is out of range
        """
        if not self.has_index(index):
            raise InvalidIndex(f"Palette has no entry at index {index} (size {len(self._entries)})")
        return self._entries[index].color_for(representation)

    def colors(self, representation: Representation) -> List[AnyColor]:
        return [entry.color_for(representation) for entry in self._entries]

    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]
