from __future__ import annotations
from dataclasses import replace
from typing import List, Optional, Tuple
import logging

from PySide6.QtGui import QPainter

from paint_qt.core.data_models import (
    LineShape, OvalShape, Point, RectShape, Shape, Tool, ToolConfig,
)
from paint_qt.core import renderer

logger = logging.getLogger(__name__)


def _normalized(x0: int, y0: int, x1: int, y1: int) -> Tuple[int, int, int, int]:
    return min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0)


class DrawingState:
    """Quản lý dữ liệu bản vẽ: điểm nét tự do, hình đã chốt và hình đang kéo."""
    def __init__(self, config: Optional[ToolConfig] = None):
        self.config = config if config is not None else ToolConfig()
        self._points: List[Point] = []
        self._shapes: List[Shape] = []
        self._in_progress: Optional[Shape] = None
        self._drag_start: Optional[Tuple[int, int]] = None

    # --------- read-only ----------
    @property
    def points(self) -> Tuple[Point, ...]: return tuple(self._points)
    @property
    def shapes(self) -> Tuple[Shape, ...]: return tuple(self._shapes)
    @property
    def in_progress(self) -> Optional[Shape]: return self._in_progress

    def is_empty(self) -> bool:
        return not self._points and not self._shapes and self._in_progress is None

    # --------- freehand ----------
    def add_freehand_point(self, x: int, y: int, connected: bool) -> Optional[Point]:
        c = self.config
        if c.tool is not Tool.PENCIL:
            return None
        pt = Point(int(x), int(y), c.color, c.brush_size, bool(connected))
        self._points.append(pt)
        return pt

    # --------- shapes ----------
    def begin_shape(self, x: int, y: int) -> Optional[Shape]:
        c = self.config
        if c.tool is Tool.PENCIL:
            return None
        x, y = int(x), int(y)
        self._drag_start = (x, y)
        if c.tool is Tool.RECTANGLE:
            shape = RectShape(x, y, 0, 0, c.color, c.brush_size, c.filled)
        elif c.tool is Tool.OVAL:
            shape = OvalShape(x, y, 0, 0, c.color, c.brush_size, c.filled)
        else:
            shape = LineShape(x, y, 0, 0, c.color, c.brush_size)
        self._in_progress = shape
        return shape

    def _active_shape(self) -> Optional[Shape]:
        """Hình đang kéo, nếu công cụ hiện tại vẫn khớp loại hình; không khớp thì bỏ hình."""
        shape = self._in_progress
        if shape is not None and shape.kind.value != self.config.tool.value:
            self.cancel_shape()
            return None
        return shape

    def update_shape(self, x: int, y: int) -> Optional[Shape]:
        shape = self._active_shape()
        if shape is None or self._drag_start is None:
            return None
        x0, y0 = self._drag_start
        x, y = int(x), int(y)
        if isinstance(shape, LineShape):
            shape = replace(shape, width=x - x0, height=y - y0)
        else:
            nx, ny, w, h = _normalized(x0, y0, x, y)
            shape = replace(shape, x=nx, y=ny, width=w, height=h)
        self._in_progress = shape
        return shape

    def commit_shape(self) -> Optional[Shape]:
        shape = self._active_shape()
        if shape is None:
            return None
        self._shapes.append(shape)
        self._in_progress = None
        self._drag_start = None
        logger.debug("Đã chốt hình %s (%d hình)", shape.kind.value, len(self._shapes))
        return shape

    def cancel_shape(self) -> None:
        self._in_progress = None
        self._drag_start = None

    def clear(self) -> None:
        self._points.clear()
        self._shapes.clear()
        self.cancel_shape()
        logger.debug("Đã xóa bản vẽ")

    # --------- pointer routing ----------
    def pointer_down(self, x: int, y: int) -> None:
        if self.config.is_shape_tool:
            self.begin_shape(x, y)
        else:
            self.add_freehand_point(x, y, connected=False)

    def pointer_drag(self, x: int, y: int) -> None:
        if self.config.is_shape_tool:
            self.update_shape(x, y)
        else:
            self.add_freehand_point(x, y, connected=True)

    def pointer_up(self, x: int, y: int) -> None:
        if self.config.is_shape_tool:
            self.update_shape(x, y)
            self.commit_shape()

    def set_tool(self, tool) -> None:
        """Đổi công cụ; hình đang kéo dở (nếu có) bị bỏ."""
        self.cancel_shape()
        self.config.set_tool(tool)

    # --------- render ----------
    def render(self, painter: QPainter, background=None) -> None:
        renderer.render(self, painter, background)
