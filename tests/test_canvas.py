import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
pytest.importorskip("PySide6")

from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from bezchain.core import MouseButton
from bezchain.main import MainWindow
from bezchain.widgets import CurveCanvasWidget
from bezchain.widgets.utils import point_to_qpoint, qpoint_to_point, to_mouse_button


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def test_button_mapping():
    assert to_mouse_button(Qt.MouseButton.LeftButton) is MouseButton.LEFT
    assert to_mouse_button(Qt.MouseButton.RightButton) is MouseButton.RIGHT
    assert to_mouse_button(Qt.MouseButton.MiddleButton) is MouseButton.MIDDLE
    assert to_mouse_button(Qt.MouseButton.BackButton) is None


def test_point_conversion_roundtrip():
    assert qpoint_to_point(point_to_qpoint((1.5, -2.0))) == (1.5, -2.0)


def test_clicks_edit_the_curve(qapp):
    canvas = CurveCanvasWidget()
    canvas.resize(400, 300)
    canvas.show()
    changes = []
    canvas.pointsChanged.connect(lambda: changes.append(1))

    QTest.mouseClick(canvas, Qt.MouseButton.RightButton, Qt.KeyboardModifier.NoModifier, QPoint(50, 50))
    QTest.mouseClick(canvas, Qt.MouseButton.RightButton, Qt.KeyboardModifier.NoModifier, QPoint(150, 60))
    assert canvas.editor.model.control_points() == ((50.0, 50.0), (150.0, 60.0))
    assert changes

    QTest.mouseClick(canvas, Qt.MouseButton.MiddleButton, Qt.KeyboardModifier.NoModifier, QPoint(52, 48))
    assert canvas.editor.model.control_points() == ((150.0, 60.0),)

    canvas.clear()
    assert len(canvas.editor.model) == 0
    canvas.deleteLater()


def test_paint_with_curve(qapp):
    window = MainWindow()
    window.resize(400, 300)
    model = window.canvas.editor.model
    for x, y in [(10, 10), (100, 10), (100, 100), (10, 100), (200, 200)]:
        model.add_point(x, y)
    image = window.canvas.grab()
    assert not image.isNull()
    window.deleteLater()
