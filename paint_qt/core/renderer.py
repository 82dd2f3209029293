from __future__ import annotations
from typing import Optional, TYPE_CHECKING
from PySide6 import QtCore
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPen

from paint_qt.core.data_models import (
    BACKGROUND, RGB, LineShape, OvalShape, Point, RectShape, Shape,
)

if TYPE_CHECKING:
    from paint_qt.state.drawing_state import DrawingState


def _dot(p: QPainter, pt: Point):
    p.setPen(Qt.NoPen)
    p.setBrush(QColor(*pt.color))
    p.drawEllipse(QtCore.QRect(pt.x - pt.size // 2, pt.y - pt.size // 2, pt.size, pt.size))


def _segment(p: QPainter, p1: Point, p2: Point):
    p.setPen(QPen(QColor(*p1.color), p1.size, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
    p.setBrush(Qt.NoBrush)
    p.drawLine(p1.x, p1.y, p2.x, p2.y)


def draw_points(p: QPainter, points):
    """Vẽ nét tự do theo từng cặp điểm liên tiếp, rồi chấm điểm cuối cùng."""
    for p1, p2 in zip(points, points[1:]):
        if p2.connected:
            _segment(p, p1, p2)
        else:
            _dot(p, p1)
    if points:
        _dot(p, points[-1])


def draw_shape(p: QPainter, s: Shape):
    color = QColor(*s.color)
    p.setPen(QPen(color, s.line_width))
    if isinstance(s, LineShape):
        p.setBrush(Qt.NoBrush)
        x2, y2 = s.end
        p.drawLine(s.x, s.y, x2, y2)
    elif isinstance(s, (RectShape, OvalShape)):
        p.setBrush(color if s.filled else Qt.NoBrush)
        rect = QtCore.QRect(s.x, s.y, s.width, s.height)
        (p.drawRect if isinstance(s, RectShape) else p.drawEllipse)(rect)
    else:
        raise TypeError(f"Không hỗ trợ loại hình: {type(s).__name__}")


def render(state: 'DrawingState', p: QPainter, background: Optional[RGB] = None,
           rect: Optional[QtCore.QRect] = None):
    """Vẽ lại toàn bộ trạng thái lên painter: nền (nếu có), nét tự do, hình đã chốt, hình đang kéo."""
    p.save()
    p.setRenderHint(QPainter.Antialiasing, True)
    if background is not None:
        if rect is None:
            dev = p.device()
            rect = QtCore.QRect(0, 0, dev.width(), dev.height())
        p.fillRect(rect, QColor(*background))

    draw_points(p, state.points)
    for s in state.shapes:
        draw_shape(p, s)
    if state.in_progress is not None:
        draw_shape(p, state.in_progress)
    p.restore()


def render_image(state: 'DrawingState', width: int, height: int,
                 background: RGB = BACKGROUND) -> QImage:
    """Vẽ trạng thái vào một QImage mới (offscreen) kích thước width x height.

    Kích thước nhỏ hơn 1 được nâng lên 1 (canvas 0x0 cho ảnh 1x1).
    """
    img = QImage(max(1, int(width)), max(1, int(height)), QImage.Format_RGB32)
    p = QPainter(img)
    try:
        render(state, p, background)
    finally:
        p.end()
    return img
