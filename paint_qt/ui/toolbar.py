from __future__ import annotations
from PySide6 import QtGui, QtWidgets
from PySide6.QtCore import Signal
from PySide6.QtGui import QAction, QActionGroup, QKeySequence

from paint_qt.core.data_models import PALETTE, Tool
from .width_menu import create_width_menu, brush_label_text

_TOOL_LABELS = [
    (Tool.PENCIL, "✏️ Bút chì"),
    (Tool.RECTANGLE, "▭ Chữ nhật"),
    (Tool.OVAL, "◯ Oval"),
    (Tool.LINE, "— Đường thẳng"),
]
_COLOR_LABELS = {"black": "Đen", "red": "Đỏ", "blue": "Xanh dương", "green": "Xanh lá"}


class PaintToolbar(QtWidgets.QToolBar):
    # ==== Signals (Window sẽ connect) ====
    toolChanged = Signal(str)               # Tool value
    colorPicked = Signal(tuple)             # (r,g,b)
    widthChanged = Signal(int)
    fillToggled = Signal(bool)

    requestClear = Signal()
    requestSave = Signal()

    def __init__(self, parent=None, init_width=5, init_tool=Tool.PENCIL, init_fill=False):
        super().__init__("Tools", parent)
        self.setMovable(False)

        # Công cụ: chỉ một công cụ được chọn tại một thời điểm
        group = QActionGroup(self); group.setExclusive(True)
        self._tool_actions = {}
        for tool, text in _TOOL_LABELS:
            act = QAction(text, self, checkable=True)
            act.triggered.connect(lambda _=False, t=tool: self.toolChanged.emit(t.value))
            group.addAction(act); self.addAction(act)
            self._tool_actions[tool] = act
        self._tool_actions[Tool(init_tool)].setChecked(True)

        self.act_fill = QAction("■ Tô đặc", self, checkable=True)
        self.act_fill.setChecked(bool(init_fill))
        self.act_fill.toggled.connect(self.fillToggled.emit)
        self.addAction(self.act_fill)

        self.addSeparator()

        # Palette
        for name, rgb in PALETTE.items():
            a = self._act(_COLOR_LABELS.get(name, name), lambda _=False, c=rgb: self.colorPicked.emit(c))
            a.setIcon(self._swatch(rgb))
            self.addAction(a)

        # Width menu
        self.addWidget(QtWidgets.QLabel("｜"))
        self.btn_width = QtWidgets.QToolButton(self); self.btn_width.setPopupMode(QtWidgets.QToolButton.InstantPopup)
        self.menu_width, self._width_slider, self._width_label = create_width_menu(self, init_width, self._on_width)
        self.btn_width.setMenu(self.menu_width); self.addWidget(self.btn_width)
        self._sync_width(init_width)

        self.addSeparator()

        a_clear = self._act("🗑 Xóa hết", self.requestClear.emit); self.addAction(a_clear)
        a_save = self._act("💾 Lưu ảnh…", self.requestSave.emit); a_save.setShortcut(QKeySequence.Save); self.addAction(a_save)

    # ---- helpers ----
    def _act(self, text, slot):
        a = QAction(text, self); a.triggered.connect(slot); return a

    @staticmethod
    def _swatch(rgb) -> QtGui.QIcon:
        pm = QtGui.QPixmap(14, 14); pm.fill(QtGui.QColor(*rgb))
        return QtGui.QIcon(pm)

    def _sync_width(self, v: int):
        self.btn_width.setText(f"✏️ {v}px")
        self._width_label.setText(brush_label_text(v))

    def _on_width(self, v: int):
        self._sync_width(v)
        self.widthChanged.emit(int(v))

    def width_value(self) -> int:
        return self._width_slider.value()
