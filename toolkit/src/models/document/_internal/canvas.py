"""Canvas (artboard) and the per-document canvas collection"""

import logging
from typing import Iterator, List, Optional

from models.errors import InvalidIndex, DocumentStructureError
from models.geometry import CanvasRegion


class Canvas:
    """Named rectangular region of a document"""

    def __init__(self, region: CanvasRegion, name: str = ""):
        self.region = region
        self.name = name

    def __repr__(self) -> str:
        return f"Canvas(name={self.name!r}, region={tuple(self.region)})"


class Canvases:
    """Ordered canvas collection with index-based activation

    A document always holds at least one canvas, so removing the last one
    is refused.
    """

    _logger = logging.getLogger('Canvases')

    def __init__(self):
        self._canvases: List[Canvas] = []
        self._active_index = 0

    def __len__(self) -> int:
        return len(self._canvases)

    def __iter__(self) -> Iterator[Canvas]:
        return iter(self._canvases)

    def __getitem__(self, index: int) -> Canvas:
        self._check_index(index)
        return self._canvases[index]

    def _check_index(self, index: int):
        if not 0 <= index < len(self._canvases):
            raise InvalidIndex(f"There is no canvas with the index {index}")

    def add(self, region: CanvasRegion, name: Optional[str] = None) -> Canvas:
        """Append a canvas covering region"""
        if name is None:
            name = f"Canvas {len(self._canvases) + 1}"
        canvas = Canvas(region, name)
        self._canvases.append(canvas)
        self._logger.debug(f"Added {canvas!r}")
        return canvas

    def remove(self, index: int):
        """Remove the canvas at index

        Raises:
            InvalidIndex: If index is out of range
            DocumentStructureError: If it is the only canvas
        """
        self._check_index(index)
        if len(self._canvases) == 1:
            raise DocumentStructureError("A document must keep at least one canvas")
        removed = self._canvases.pop(index)
        if self._active_index >= len(self._canvases) or self._active_index > index:
            self._active_index = max(0, self._active_index - 1)
        self._logger.debug(f"Removed {removed!r}")

    @property
    def active_index(self) -> int:
        return self._active_index

    def set_active_canvas_index(self, index: int):
        self._check_index(index)
        self._active_index = index

    def get_active(self) -> Canvas:
        return self._canvases[self._active_index]
