"""
Tests for JSON palette configuration files.
"""
import json

import pytest

from models.color import RGBColor, CMYKColor, Representation
from models.errors import PaletteLengthMismatch
from utils import logger
from utils.palette_loader import load_palette, save_palette, palette_from_dict


def _write(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


class TestPaletteFromDict:

    def test_builds_named_entries(self):
        palette = palette_from_dict({
            "colors": [
                {"name": "brand_red", "rgb": [255, 0, 0], "cmyk": [0, 100, 100, 0]},
                {"rgb": [0, 0, 0], "cmyk": [0, 0, 0, 255]},
            ]
        })
        assert palette.names() == ['brand_red', '']
        assert palette[1].secondary == CMYKColor(0, 0, 0, 255)

    def test_missing_colors_key(self):
        with pytest.raises(ValueError):
            palette_from_dict({})

    def test_entry_missing_cmyk(self):
        with pytest.raises(PaletteLengthMismatch):
            palette_from_dict({"colors": [{"rgb": [1, 2, 3]}]})


class TestLoadPalette:

    def test_load(self, tmp_path):
        path = _write(tmp_path / "brand.json", {
            "colors": [{"name": "blue", "rgb": [0, 0, 255], "cmyk": [100, 100, 0, 0]}]
        })
        palette = load_palette(path)
        assert len(palette) == 1
        assert palette[0].primary == RGBColor(0, 0, 255)

    def test_save_then_load(self, tmp_path, sample_palette):
        path = str(tmp_path / "nested" / "palette.json")
        save_palette(sample_palette, path)
        loaded = load_palette(path)
        assert loaded.names() == sample_palette.names()
        assert loaded.colors(Representation.CMYK) == sample_palette.colors(Representation.CMYK)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_palette(str(tmp_path / "absent.json"))

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding='utf-8')
        with pytest.raises(json.JSONDecodeError):
            load_palette(str(path))

    def test_null_channels_go_through_error_handling(self, tmp_path, alerts, monkeypatch):
        monkeypatch.setattr(logger, 'DEBUG_MODE', False)
        path = _write(tmp_path / "nulls.json", {"colors": [{"rgb": None, "cmyk": [0, 0, 0, 0]}]})
        with pytest.raises(TypeError):
            load_palette(path)
        assert len(alerts) == 1
        assert "nulls.json" in alerts[0][1]

    def test_non_object_entry_raises_type_error(self, tmp_path):
        path = _write(tmp_path / "flat.json", {"colors": [7]})
        with pytest.raises(TypeError):
            load_palette(path)
