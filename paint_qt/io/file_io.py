from __future__ import annotations
import os
import logging
from typing import TYPE_CHECKING
from PySide6.QtGui import QImageWriter

from paint_qt.core.data_models import BACKGROUND
from paint_qt.core.renderer import render_image

if TYPE_CHECKING:
    from paint_qt.state.drawing_state import DrawingState

logger = logging.getLogger(__name__)


class ExportError(OSError):
    """Không ghi được file ảnh (sai đường dẫn, không có quyền ghi...)."""


def ensure_png_suffix(path: str) -> str:
    if not path.lower().endswith(".png"):
        path += ".png"
    return path


def export_png(state: 'DrawingState', path: str, width: int, height: int) -> str:
    """Xuất bản vẽ ra PNG nền trắng, kích thước width x height. Trả về đường dẫn đã ghi."""
    path = os.path.abspath(ensure_png_suffix(path))
    img = render_image(state, width, height, BACKGROUND)

    writer = QImageWriter(path, b"png")
    if not writer.write(img):
        msg = writer.errorString() or "unknown error"
        logger.error("Xuất PNG thất bại (%s): %s", path, msg)
        raise ExportError(msg)
    logger.info("Đã xuất PNG %dx%d: %s", img.width(), img.height(), path)
    return path
