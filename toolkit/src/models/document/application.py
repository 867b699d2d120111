"""Application - owner of open documents and document creation"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from constants import DEFAULT_DOCUMENT_WIDTH, DEFAULT_DOCUMENT_HEIGHT, DEFAULT_UNITS
from models.color import Representation
from models.geometry import CanvasRegion
from .core import Document


@dataclass
class DocumentPreset:
    """Settings for a new document"""
    color_mode: Representation = Representation.RGB
    units: str = DEFAULT_UNITS
    width: float = DEFAULT_DOCUMENT_WIDTH
    height: float = DEFAULT_DOCUMENT_HEIGHT


class Application:
    """Host application holding every open document

    Documents created here always start with one default canvas covering
    the preset size, anchored at the origin.
    """

    def __init__(self):
        self._logger = logging.getLogger('Application')
        self._documents: List[Document] = []
        self._active: Optional[Document] = None

    @property
    def documents(self) -> List[Document]:
        return list(self._documents)

    @property
    def active_document(self) -> Optional[Document]:
        return self._active

    def add_document(self, preset: Optional[DocumentPreset] = None, name: Optional[str] = None) -> Document:
        """Create, register and activate a new document"""
        if preset is None:
            preset = DocumentPreset()
        if name is None:
            name = f"Untitled-{len(self._documents) + 1}"

        doc = Document(color_space=preset.color_mode, ruler_units=preset.units, application=self, name=name)
        doc.canvases.add(CanvasRegion(0.0, 0.0, preset.width, -preset.height))

        self._documents.append(doc)
        self._active = doc
        self._logger.info(f"Opened {doc!r}")
        return doc

    def close_document(self, doc: Document):
        self._documents.remove(doc)
        if self._active is doc:
            self._active = self._documents[-1] if self._documents else None
