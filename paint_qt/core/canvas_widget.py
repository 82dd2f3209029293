from __future__ import annotations
from PySide6 import QtCore, QtGui, QtWidgets
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QPainter
import logging

from paint_qt.core.data_models import BACKGROUND
from paint_qt.state.drawing_state import DrawingState

logger = logging.getLogger(__name__)


class CanvasWidget(QtWidgets.QWidget):
    """Canvas: tô nền, vẽ lại DrawingState, chuyển sự kiện chuột vào model."""
    changed = QtCore.Signal()

    def __init__(self, state: DrawingState, parent=None):
        super().__init__(parent)
        self.state = state
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setCursor(Qt.CrossCursor)
        self._pressed = False

    def sizeHint(self) -> QtCore.QSize: return QSize(800, 540)

    # ---- paint ----
    def paintEvent(self, e: QtGui.QPaintEvent):
        p = QPainter(self)
        try:
            self.state.render(p, BACKGROUND)
        except Exception as ex:
            # Log lỗi chi tiết để debug
            logger.warning(f"Lỗi vẽ canvas: {ex}")
        finally:
            p.end()

    # ---- events → model ----
    @staticmethod
    def _pos(e: QtGui.QMouseEvent):
        pt = e.position().toPoint()
        return pt.x(), pt.y()

    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() != Qt.LeftButton:
            return
        self._pressed = True
        self.state.pointer_down(*self._pos(e))
        self._changed()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        if not self._pressed or not (e.buttons() & Qt.LeftButton):
            return
        self.state.pointer_drag(*self._pos(e))
        self._changed()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() != Qt.LeftButton or not self._pressed:
            return
        self._pressed = False
        self.state.pointer_up(*self._pos(e))
        self._changed()

    def _changed(self):
        self.update()
        self.changed.emit()
