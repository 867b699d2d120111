"""
Shared fixtures for Artboard Toolkit tests.

Provides an application, documents with canvases and content, and palettes.
"""
import sys
import os
import pytest

# Ensure toolkit/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'toolkit', 'src'))


# ── Sample palette data ─────────────────────────────────────────────────

SAMPLE_RGB = [[255, 0, 0], [0, 0, 255], [255, 255, 255]]
SAMPLE_CMYK = [[0, 100, 100, 0], [100, 100, 0, 0], [0, 0, 0, 0]]
SAMPLE_NAMES = ['red', 'blue', 'white']


@pytest.fixture(autouse=True)
def reset_alert_handler():
    """Alerts are module-global; never leak a handler between tests"""
    from utils.logger import set_alert_handler
    set_alert_handler(None)
    yield
    set_alert_handler(None)


@pytest.fixture
def app():
    """Fresh host application"""
    from models.document import Application
    return Application()


@pytest.fixture
def two_canvas_doc(app):
    """RGB document with two 100x100 canvases side by side and two paths

    Canvas 0: [0, 0, 100, -100]
    Canvas 1: [150, 0, 250, -100]
    'first' sits on canvas 0 at (10, -20), 'second' on canvas 1 at (160, -50).
    """
    from models.color import RGBColor
    from services.geometry import canvas_region

    doc = app.add_document(name="source")
    doc.canvases.add(canvas_region(0, 0, 100, 100))
    doc.canvases.add(canvas_region(150, 0, 100, 100))
    doc.canvases.remove(0)

    doc.add_path(left=10, top=-20, width=30, height=30, fill_color=RGBColor(255, 0, 0), name='first')
    doc.add_path(left=160, top=-50, width=20, height=20, fill_color=RGBColor(0, 0, 255), name='second')
    return doc


@pytest.fixture
def sample_palette():
    """Three-color palette (red, blue, white)"""
    from services.palette import build_palette
    return build_palette(SAMPLE_RGB, SAMPLE_CMYK, SAMPLE_NAMES)


@pytest.fixture
def alerts():
    """Collect (title, message) pairs sent to the alert handler"""
    from utils.logger import set_alert_handler
    received = []
    set_alert_handler(lambda title, message: received.append((title, message)))
    return received
