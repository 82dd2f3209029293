import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6 import QtCore, QtWidgets

from paint_qt.core.data_models import ToolConfig
from paint_qt.state.drawing_state import DrawingState


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def config():
    return ToolConfig()


@pytest.fixture
def state(config):
    return DrawingState(config)


@pytest.fixture
def settings(tmp_path):
    return QtCore.QSettings(str(tmp_path / "paint_qt.ini"), QtCore.QSettings.IniFormat)

