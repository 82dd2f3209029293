import os

import pytest
from PySide6.QtGui import QImage

from paint_qt.core.data_models import Tool
from paint_qt.core.renderer import render_image
from paint_qt.io.file_io import ExportError, ensure_png_suffix, export_png

pytestmark = pytest.mark.usefixtures("qapp")


@pytest.mark.parametrize("name,expected", [
    ("drawing", "drawing.png"),
    ("drawing.png", "drawing.png"),
    ("DRAWING.PNG", "DRAWING.PNG"),
    ("drawing.jpg", "drawing.jpg.png"),
])
def test_ensure_png_suffix(name, expected):
    assert ensure_png_suffix(name) == expected


def test_export_appends_suffix_and_sizes_image(state, tmp_path):
    saved = export_png(state, str(tmp_path / "sketch"), 120, 90)
    assert saved == str(tmp_path / "sketch.png")
    img = QImage(saved)
    assert (img.width(), img.height()) == (120, 90)


def test_export_matches_render(state, config, tmp_path):
    config.set_color((255, 0, 0))
    config.set_brush_size(9)
    state.add_freehand_point(10, 10, connected=False)
    state.add_freehand_point(60, 40, connected=True)
    config.set_tool(Tool.OVAL)
    config.set_filled(True)
    state.begin_shape(70, 20)
    state.update_shape(100, 70)
    state.commit_shape()

    saved = export_png(state, str(tmp_path / "out.png"), 120, 90)
    img = QImage(saved).convertToFormat(QImage.Format_RGB32)
    assert img == render_image(state, 120, 90)
    c = img.pixelColor(115, 85)
    assert (c.red(), c.green(), c.blue()) == (255, 255, 255)


def test_export_empty_is_white(state, tmp_path):
    saved = export_png(state, str(tmp_path / "blank.PNG"), 16, 8)
    img = QImage(saved)
    for x in range(16):
        for y in range(8):
            c = img.pixelColor(x, y)
            assert (c.red(), c.green(), c.blue()) == (255, 255, 255)


def test_export_failure_raises_and_keeps_state(state, tmp_path):
    state.add_freehand_point(1, 1, connected=False)
    target = tmp_path / "missing" / "dir" / "x.png"
    with pytest.raises(ExportError) as info:
        export_png(state, str(target), 10, 10)
    assert str(info.value)
    assert isinstance(info.value, OSError)
    assert not os.path.exists(target)
    assert len(state.points) == 1


def test_export_of_zero_size_canvas_is_one_pixel(state, tmp_path):
    img = QImage(export_png(state, str(tmp_path / "empty.png"), 0, 0))
    assert (img.width(), img.height()) == (1, 1)
