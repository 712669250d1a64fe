from typing import Optional

from PySide6 import QtCore

from bezchain.core import Point, MouseButton

_BUTTONS = {
    QtCore.Qt.MouseButton.LeftButton: MouseButton.LEFT,
    QtCore.Qt.MouseButton.RightButton: MouseButton.RIGHT,
    QtCore.Qt.MouseButton.MiddleButton: MouseButton.MIDDLE,
}


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())

def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])

def to_mouse_button(button: QtCore.Qt.MouseButton) -> Optional[MouseButton]:
    return _BUTTONS.get(button)
