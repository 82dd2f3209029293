import pytest

from paint_qt.core.data_models import PALETTE, Tool, ToolConfig


def test_defaults():
    c = ToolConfig()
    assert c.color == (0, 0, 0)
    assert c.brush_size == 5
    assert c.tool is Tool.PENCIL
    assert c.filled is False
    assert not c.is_shape_tool


@pytest.mark.parametrize("value", [1, 20])
def test_brush_size_bounds_accepted(value):
    c = ToolConfig()
    c.set_brush_size(value)
    assert c.brush_size == value


@pytest.mark.parametrize("value", [0, 21, -3])
def test_brush_size_out_of_range_rejected(value):
    c = ToolConfig()
    with pytest.raises(ValueError):
        c.set_brush_size(value)
    assert c.brush_size == 5


def test_set_tool_accepts_string_value():
    c = ToolConfig()
    c.set_tool("oval")
    assert c.tool is Tool.OVAL
    assert c.is_shape_tool
    with pytest.raises(ValueError):
        c.set_tool("spray")


def test_set_color():
    c = ToolConfig()
    c.set_color(PALETTE["red"])
    assert c.color == (255, 0, 0)
    for bad in [(256, 0, 0), (1, 2), "red", None]:
        with pytest.raises(ValueError):
            c.set_color(bad)
    assert c.color == (255, 0, 0)


def test_palette_order():
    assert list(PALETTE) == ["black", "red", "blue", "green"]
