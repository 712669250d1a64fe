import logging
import sys

from PySide6 import QtWidgets

from bezchain.core import CurveEditor, EditorSettings
from bezchain.widgets import CurveCanvasWidget


class MainWindow(QtWidgets.QWidget):
    def __init__(self, settings: EditorSettings | None = None):
        super().__init__()
        self.setWindowTitle("Bezier Demo")

        self.layout = QtWidgets.QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.canvas = CurveCanvasWidget(CurveEditor(settings=settings or EditorSettings()), self)
        self.layout.addWidget(self.canvas)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

    widget = MainWindow()
    widget.resize(800, 600)
    widget.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
