"""
Tests for duplicating canvases and content into a new document.

Covers:
- New document settings (representation, units, origins)
- Canvas copies and removal of the default canvas
- Content duplication order and lock exclusion
- Layout preservation relative to the canvases
- Guard against documents without canvases
"""
import pytest

import services.duplication as duplication
from models.color import Representation, RGBColor
from models.document import Document
from models.errors import EmptyCollection
from models.geometry import Point
from services.duplication import (
    new_document, duplicate_canvas_in_new_document, duplicate_canvases_in_new_document,
    duplicate_selection_in_new_document, duplicate_document,
)
from services.geometry import canvas_region, offset, top_left_of, top_left_of_canvases
from services.selection import select_everything


# ══════════════════════════════════════════════════════════════════════════
# Document provisioning
# ══════════════════════════════════════════════════════════════════════════

class TestNewDocument:

    def test_representation_and_units(self, app):
        source = app.add_document()
        source.ruler_units = 'millimeters'
        doc = new_document(source, Representation.CMYK)
        assert doc.color_space is Representation.CMYK
        assert doc.ruler_units == 'millimeters'
        assert doc in app.documents

    def test_origins_copied(self, app):
        source = app.add_document()
        source.page_origin = Point(5, 6)
        source.ruler_origin = Point(-1, 2)
        doc = new_document(source, Representation.RGB)
        assert doc.page_origin == Point(5, 6)
        assert doc.ruler_origin == Point(-1, 2)

    def test_requires_application(self):
        with pytest.raises(ValueError):
            new_document(Document(), Representation.CMYK)


class TestCanvasDuplication:

    def test_single_canvas(self, two_canvas_doc):
        canvas = two_canvas_doc.canvases[1]
        doc = duplicate_canvas_in_new_document(two_canvas_doc, canvas, Representation.CMYK)
        assert len(doc.canvases) == 1
        assert doc.canvases[0].region == canvas.region

    def test_all_canvases_same_order(self, two_canvas_doc):
        doc = duplicate_canvases_in_new_document(two_canvas_doc, Representation.CMYK)
        assert [c.region for c in doc.canvases] == [c.region for c in two_canvas_doc.canvases]

    def test_default_canvas_removed(self, two_canvas_doc):
        doc = duplicate_canvases_in_new_document(two_canvas_doc, Representation.CMYK)
        assert canvas_region(0, 0, 612, 792) not in [c.region for c in doc.canvases]

    def test_no_canvases_rejected(self, app):
        doc = Document(application=app)
        with pytest.raises(EmptyCollection):
            duplicate_canvases_in_new_document(doc, Representation.CMYK)


# ══════════════════════════════════════════════════════════════════════════
# Content duplication
# ══════════════════════════════════════════════════════════════════════════

class TestSelectionDuplication:

    def test_order_preserved_and_sources_deselected(self, two_canvas_doc, app):
        selection = select_everything(two_canvas_doc)
        dest = app.add_document()
        copies = duplicate_selection_in_new_document(selection, dest)
        assert [c.name for c in copies] == ['first', 'second']
        assert [c.name for c in dest.path_items] == ['first', 'second']
        assert not any(item.selected for item in selection)

    def test_copies_are_independent(self, two_canvas_doc, app):
        selection = select_everything(two_canvas_doc)
        copies = duplicate_selection_in_new_document(selection, app.add_document())
        copies[0].fill_color.red = 1
        copies[0].translate(5, 5)
        assert selection[0].fill_color == RGBColor(255, 0, 0)
        assert selection[0].position == Point(10, -20)


class TestDuplicateDocument:

    def test_new_document_in_target_representation(self, two_canvas_doc):
        doc = duplicate_document(two_canvas_doc, Representation.CMYK)
        assert doc.color_space is Representation.CMYK
        assert doc is not two_canvas_doc

    def test_layout_preserved(self, two_canvas_doc):
        source_items = two_canvas_doc.path_items
        expected = offset(top_left_of(source_items), top_left_of_canvases(two_canvas_doc.canvases))

        doc = duplicate_document(two_canvas_doc, Representation.CMYK)
        actual = offset(top_left_of(doc.path_items), top_left_of_canvases(doc.canvases))
        assert actual.is_close(expected)

    def test_layout_preserved_when_canvases_move(self, two_canvas_doc, monkeypatch):
        """Content follows the canvases when the new ones are placed elsewhere."""
        real = duplication.duplicate_canvases_in_new_document

        def shifted(source, representation):
            doc = real(source, representation)
            doc.canvases.add(canvas_region(1000, 500, 100, 100))
            doc.canvases.add(canvas_region(1150, 500, 100, 100))
            doc.canvases.remove(0)
            doc.canvases.remove(0)
            return doc

        monkeypatch.setattr(duplication, 'duplicate_canvases_in_new_document', shifted)
        doc = duplicate_document(two_canvas_doc, Representation.CMYK)

        assert top_left_of_canvases(doc.canvases) == Point(1000, -500)
        assert top_left_of(doc.path_items).is_close(Point(1010, -520))
        first, second = doc.path_items
        assert offset(second.position, first.position).is_close(Point(150, -30))

    def test_locked_content_not_propagated(self, two_canvas_doc):
        two_canvas_doc.add_path(left=0, top=0, name='locked', locked=True)
        layer = two_canvas_doc.add_layer('Locked layer', locked=True)
        two_canvas_doc.add_path(left=0, top=0, name='on_locked_layer', layer=layer)

        doc = duplicate_document(two_canvas_doc, Representation.CMYK)
        assert [i.name for i in doc.path_items] == ['first', 'second']
        # Source keeps its locked content
        assert len(two_canvas_doc.path_items) == 4

    def test_empty_content_still_duplicates_canvases(self, app):
        source = app.add_document()
        doc = duplicate_document(source, Representation.CMYK)
        assert doc.path_items == []
        assert len(doc.canvases) == 1

    def test_no_canvases_rejected(self, app):
        doc = Document(application=app)
        doc.add_path(left=1, top=1)
        with pytest.raises(EmptyCollection):
            duplicate_document(doc, Representation.CMYK)
