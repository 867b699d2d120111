"""
End-to-end tests: duplicate a document into CMYK and map fills through a palette.
"""
from models.color import RGBColor, CMYKColor, Representation
from models.geometry import Point
from services.conversion import convert_document_to_palette
from services.geometry import offset, top_left_of, top_left_of_canvases


class TestConvertDocumentToPalette:

    def test_all_colors_converted(self, two_canvas_doc, sample_palette):
        new_doc, unmatched = convert_document_to_palette(two_canvas_doc, sample_palette, Representation.CMYK)
        assert unmatched == []
        assert new_doc.color_space is Representation.CMYK
        assert [i.fill_color for i in new_doc.path_items] == [CMYKColor(0, 100, 100, 0), CMYKColor(100, 100, 0, 0)]
        assert new_doc.text_frames == []

    def test_source_left_untouched(self, two_canvas_doc, sample_palette):
        convert_document_to_palette(two_canvas_doc, sample_palette, Representation.CMYK)
        assert [i.fill_color for i in two_canvas_doc.path_items] == [RGBColor(255, 0, 0), RGBColor(0, 0, 255)]

    def test_layout_kept(self, two_canvas_doc, sample_palette):
        expected = offset(top_left_of(two_canvas_doc.path_items), top_left_of_canvases(two_canvas_doc.canvases))
        new_doc, _ = convert_document_to_palette(two_canvas_doc, sample_palette, Representation.CMYK)
        actual = offset(top_left_of(new_doc.path_items), top_left_of_canvases(new_doc.canvases))
        assert actual.is_close(expected)

    def test_unmatched_reported_in_new_document(self, two_canvas_doc, sample_palette, alerts):
        two_canvas_doc.add_path(left=50, top=-50, width=5, height=5, fill_color=RGBColor(1, 2, 3), name='odd')
        new_doc, unmatched = convert_document_to_palette(two_canvas_doc, sample_palette, Representation.CMYK)

        assert unmatched == ["(1, 2, 3)"]
        assert len(alerts) == 1
        assert two_canvas_doc.text_frames == []
        report = new_doc.text_frames[0]
        assert Point(report.left, report.top) == Point(0, -120)
        odd = [i for i in new_doc.path_items if i.name == 'odd'][0]
        assert odd.fill_color == RGBColor(1, 2, 3)
