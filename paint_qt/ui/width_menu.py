# paint_qt/ui/width_menu.py
from __future__ import annotations
from typing import Callable, Tuple
from PySide6 import QtWidgets
from PySide6.QtCore import Qt

from paint_qt.core.data_models import MIN_BRUSH_SIZE, MAX_BRUSH_SIZE


def brush_label_text(value: int) -> str:
    return f"Brush Size: {value}"


def create_width_menu(parent, init_value: int, callback: Callable[[int], None]) -> Tuple[
    QtWidgets.QMenu, QtWidgets.QSlider, QtWidgets.QLabel]:
    """
    Tạo menu popup chọn độ dày nét (1-20)

    Returns:
        Tuple[QMenu, QSlider, QLabel] - Menu, slider, và label để parent có thể tham chiếu
    """
    menu = QtWidgets.QMenu(parent)

    widget = QtWidgets.QWidget()
    layout = QtWidgets.QVBoxLayout(widget)
    layout.setContentsMargins(10, 10, 10, 10)
    layout.setSpacing(8)

    label = QtWidgets.QLabel(brush_label_text(init_value))
    label.setAlignment(Qt.AlignCenter)
    layout.addWidget(label)

    slider = QtWidgets.QSlider(Qt.Horizontal)
    slider.setMinimum(MIN_BRUSH_SIZE)
    slider.setMaximum(MAX_BRUSH_SIZE)
    slider.setValue(init_value)
    slider.setFixedWidth(200)
    layout.addWidget(slider)

    # Buttons cho các giá trị thường dùng
    buttons_layout = QtWidgets.QHBoxLayout()
    for value in (1, 2, 5, 10, 15, 20):
        btn = QtWidgets.QPushButton(str(value))
        btn.setFixedSize(30, 25)
        btn.clicked.connect(lambda checked=False, v=value: slider.setValue(v))
        buttons_layout.addWidget(btn)
    layout.addLayout(buttons_layout)

    slider.valueChanged.connect(callback)

    action = QtWidgets.QWidgetAction(parent)
    action.setDefaultWidget(widget)
    menu.addAction(action)

    return menu, slider, label
