from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

RGB = Tuple[int, int, int]

# Bảng màu cố định của thanh công cụ
PALETTE: Dict[str, RGB] = {
    "black": (0, 0, 0),
    "red": (255, 0, 0),
    "blue": (0, 0, 255),
    "green": (0, 255, 0),
}
BACKGROUND: RGB = (255, 255, 255)

MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 20
DEFAULT_BRUSH_SIZE = 5


class Tool(str, Enum):
    PENCIL = "pencil"
    RECTANGLE = "rect"
    OVAL = "oval"
    LINE = "line"


class ShapeKind(str, Enum):
    RECTANGLE = "rect"
    OVAL = "oval"
    LINE = "line"


# Điểm của nét tự do; connected=False là điểm bắt đầu nét.
@dataclass(frozen=True)
class Point:
    x: int
    y: int
    color: RGB
    size: int
    connected: bool


@dataclass(frozen=True)
class RectShape:
    x: int
    y: int
    width: int
    height: int
    color: RGB
    line_width: int
    filled: bool = False

    @property
    def kind(self) -> ShapeKind: return ShapeKind.RECTANGLE


@dataclass(frozen=True)
class OvalShape:
    x: int
    y: int
    width: int
    height: int
    color: RGB
    line_width: int
    filled: bool = False

    @property
    def kind(self) -> ShapeKind: return ShapeKind.OVAL


@dataclass(frozen=True)
class LineShape:
    """Đoạn thẳng: (x, y) là điểm bắt đầu kéo, (width, height) là độ lệch có dấu."""
    x: int
    y: int
    width: int
    height: int
    color: RGB
    line_width: int

    @property
    def kind(self) -> ShapeKind: return ShapeKind.LINE

    @property
    def end(self) -> Tuple[int, int]:
        return self.x + self.width, self.y + self.height


Shape = Union[RectShape, OvalShape, LineShape]


def _check_rgb(rgb) -> RGB:
    try:
        r, g, b = rgb
    except (TypeError, ValueError):
        raise ValueError(f"Màu không hợp lệ: {rgb!r}") from None
    for c in (r, g, b):
        if not isinstance(c, int) or not 0 <= c <= 255:
            raise ValueError(f"Màu không hợp lệ: {rgb!r}")
    return (r, g, b)


@dataclass
class ToolConfig:
    """Cấu hình công cụ hiện tại: màu, độ dày, công cụ đang chọn, chế độ tô."""
    color: RGB = PALETTE["black"]
    brush_size: int = DEFAULT_BRUSH_SIZE
    tool: Tool = Tool.PENCIL
    filled: bool = False

    def set_color(self, rgb) -> None:
        self.color = _check_rgb(rgb)

    def set_brush_size(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Độ dày phải là số nguyên: {value!r}")
        if not MIN_BRUSH_SIZE <= value <= MAX_BRUSH_SIZE:
            raise ValueError(f"Độ dày ngoài khoảng {MIN_BRUSH_SIZE}-{MAX_BRUSH_SIZE}: {value}")
        self.brush_size = value

    def set_tool(self, tool: Union[Tool, str]) -> None:
        self.tool = Tool(tool)

    def set_filled(self, filled: bool) -> None:
        self.filled = bool(filled)

    @property
    def is_shape_tool(self) -> bool:
        return self.tool is not Tool.PENCIL
