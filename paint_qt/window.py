from __future__ import annotations
import sys, argparse
import logging
from typing import Optional

from PySide6 import QtCore, QtWidgets

from paint_qt.core.data_models import (
    DEFAULT_BRUSH_SIZE, MAX_BRUSH_SIZE, MIN_BRUSH_SIZE, ToolConfig,
)
from paint_qt.core.canvas_widget import CanvasWidget
from paint_qt.state.drawing_state import DrawingState
from paint_qt.ui.toolbar import PaintToolbar
from paint_qt.io import file_io
from paint_qt.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def _parse_rgb(value) -> Optional[tuple]:
    try:
        parts = tuple(int(v) for v in str(value).split(","))
    except ValueError:
        return None
    return parts if len(parts) == 3 and all(0 <= c <= 255 for c in parts) else None


class DrawingToolWindow(QtWidgets.QMainWindow):
    """Cửa sổ chính – nối toolbar/canvas với DrawingState, giữ QSettings."""
    def __init__(self, parent=None, settings: Optional[QtCore.QSettings] = None):
        super().__init__(parent)
        self.setWindowTitle("Drawing Tool with Save")
        self.resize(800, 600)

        # ---- settings ----
        self._settings = settings if settings is not None else QtCore.QSettings()
        self.config = ToolConfig()
        self._load_settings()

        # ---- state ----
        self.state = DrawingState(self.config)

        # ---- UI ----
        self._build_ui()

    def _load_settings(self):
        try:
            size = int(self._settings.value("brush_size", DEFAULT_BRUSH_SIZE))
        except (TypeError, ValueError):
            size = DEFAULT_BRUSH_SIZE
        self.config.set_brush_size(max(MIN_BRUSH_SIZE, min(MAX_BRUSH_SIZE, size)))
        self.config.set_filled(str(self._settings.value("fill", "false")).lower() in ("1", "true"))
        rgb = _parse_rgb(self._settings.value("color", ""))
        if rgb:
            self.config.set_color(rgb)

    # ========== UI ==========
    def _build_ui(self):
        self.toolbar = PaintToolbar(self, init_width=self.config.brush_size,
                                    init_tool=self.config.tool,
                                    init_fill=self.config.filled)
        self.addToolBar(QtCore.Qt.BottomToolBarArea, self.toolbar)

        self.toolbar.toolChanged.connect(self._on_tool_changed)
        self.toolbar.colorPicked.connect(self._on_color_picked)
        self.toolbar.widthChanged.connect(self._on_width_changed)
        self.toolbar.fillToggled.connect(self._on_fill_toggled)
        self.toolbar.requestClear.connect(self.clear_drawing)
        self.toolbar.requestSave.connect(self.save_drawing)

        self.canvas = CanvasWidget(self.state, self)
        self.setCentralWidget(self.canvas)

    # ========== config ==========
    def _on_tool_changed(self, name: str):
        self.state.set_tool(name)
        self.canvas.update()

    def _on_color_picked(self, rgb: tuple):
        self.config.set_color(rgb)
        self._settings.setValue("color", ",".join(str(c) for c in rgb))

    def _on_width_changed(self, value: int):
        self.config.set_brush_size(int(value))
        self._settings.setValue("brush_size", int(value))

    def _on_fill_toggled(self, filled: bool):
        self.config.set_filled(filled)
        self._settings.setValue("fill", bool(filled))

    # ========== actions ==========
    def clear_drawing(self):
        self.state.clear()
        self.canvas.update()

    def export_to(self, path: str) -> str:
        """Xuất canvas hiện tại ra PNG (kích thước bằng canvas lúc xuất)."""
        return file_io.export_png(self.state, path, self.canvas.width(), self.canvas.height())

    def save_drawing(self):
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Save Drawing", "drawing.png", "PNG (*.png)")
        if not path:
            return
        try:
            saved = self.export_to(path)
        except file_io.ExportError as ex:
            QtWidgets.QMessageBox.critical(self, "Save Error", f"Error saving image: {ex}")
            return
        QtWidgets.QMessageBox.information(self, "Save Complete", f"Drawing saved successfully to: {saved}")


# ======= Entrypoint =======
def main(argv=None):
    parser = argparse.ArgumentParser(description="Drawing tool (Qt)")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING...")
    args, qt_args = parser.parse_known_args(argv if argv is not None else sys.argv[1:])
    setup_logging(args.log_level)

    app = QtWidgets.QApplication([sys.argv[0], *qt_args])
    QtCore.QCoreApplication.setOrganizationName("TutorApp")
    QtCore.QCoreApplication.setApplicationName("PaintQt")
    win = DrawingToolWindow()
    win.show()
    logger.debug("Khởi động cửa sổ vẽ")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
