from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from bezchain.core import CurveEditor, EditorSettings
from bezchain.widgets.utils import point_to_qpoint, qpoint_to_point, to_mouse_button


class CurveCanvasWidget(QtWidgets.QWidget):
    """
    View/controller for a CurveEditor.
    Paints control points, the control polyline and the cached curve samples;
    mouse events are forwarded to the editor, and a frame timer drives
    `CurveEditor.update` so samples follow a drag.
    """

    pointsChanged = QtCore.Signal()  # emitted whenever control points change (add/move/delete)

    BACKGROUND = QtGui.QColor.fromRgbF(0.1, 0.2, 0.3, 1.0)

    def __init__(self, editor: Optional[CurveEditor] = None, parent=None):
        super().__init__(parent)
        self._editor = editor or CurveEditor(settings=EditorSettings())

        self.setMouseTracking(True)
        self.setMinimumSize(320, 240)

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(self._editor.settings.frame_interval_ms)
        self._timer.timeout.connect(self._on_frame)
        self._timer.start()

        self.pointsChanged.connect(self.update)

    # --- public API -------------------------
    @property
    def editor(self) -> CurveEditor:
        return self._editor

    def clear(self) -> None:
        self._editor.model.clear()
        self._editor.selected = None
        self.pointsChanged.emit()

    # ---------- Qt events ----------
    def _on_frame(self):
        self._editor.update()
        self.update()

    def mousePressEvent(self, e: QtGui.QMouseEvent):
        button = to_mouse_button(e.button())
        if button is None:
            return
        x, y = qpoint_to_point(e.position())
        if self._editor.press(button, x, y):
            self.pointsChanged.emit()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        x, y = qpoint_to_point(e.position())
        if self._editor.motion(x, y):
            self.pointsChanged.emit()
            return
        idx = self._editor.model.find_point_near(x, y, self._editor.settings.pick_tolerance)
        self.setCursor(
            QtCore.Qt.CursorShape.SizeAllCursor if idx is not None
            else QtCore.Qt.CursorShape.CrossCursor
        )

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        button = to_mouse_button(e.button())
        if button is None:
            return
        x, y = qpoint_to_point(e.position())
        self._editor.release(button, x, y)

    # ---------- painting ----------
    def _draw_controls(self, painter: QtGui.QPainter, points):
        settings = self._editor.settings
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.setPen(QtGui.QPen(QtGui.QColor(0, 0, 0), settings.stroke_width))
        r = settings.marker_radius
        for pt in points:
            painter.drawEllipse(point_to_qpoint(pt), r, r)

    def _draw_samples(self, painter: QtGui.QPainter, samples):
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.setBrush(QtGui.QColor(255, 0, 0))
        r = self._editor.settings.sample_radius
        for group in samples:
            for pt in group:
                painter.drawEllipse(point_to_qpoint(pt), r, r)

    def _draw_polygon(self, painter: QtGui.QPainter, points):
        if len(points) < 2:
            return
        painter.setPen(QtGui.QPen(QtGui.QColor(0, 0, 0), self._editor.settings.stroke_width))
        for a, b in zip(points, points[1:]):
            painter.drawLine(point_to_qpoint(a), point_to_qpoint(b))

    def paintEvent(self, _):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        p.fillRect(self.rect(), self.BACKGROUND)

        model = self._editor.model
        points = model.control_points()
        if points:
            self._draw_controls(p, points)
            self._draw_samples(p, model.sample_points())
            self._draw_polygon(p, points)
        p.end()
