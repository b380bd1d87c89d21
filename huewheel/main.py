import logging
import sys

from PySide6 import QtCore, QtWidgets

from huewheel.core import HSBa
from huewheel.widgets import ColorWheelWidget


class MyWidget(QtWidgets.QWidget):
    def __init__(self):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)

        self.wheel = ColorWheelWidget(HSBa(0.0, 0.0, 1.0, 1.0), self)

        self.saturation = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        self.saturation.setRange(0, 100)
        self.saturation.setValue(0)

        self.label = QtWidgets.QLabel("H 0.000  S 0.000")

        self.layout.addWidget(self.wheel, stretch=1)
        self.layout.addWidget(self.saturation)
        self.layout.addWidget(self.label, alignment=QtCore.Qt.AlignmentFlag.AlignCenter)

        self.wheel.hueSaturationSelected.connect(self.on_selected)
        self.saturation.valueChanged.connect(lambda v: self.wheel.setSaturation(v / 100.0))

    @QtCore.Slot(float, float)
    def on_selected(self, hue: float, saturation: float):
        self.label.setText(f"H {hue:.3f}  S {saturation:.3f}")
        try:
            self.saturation.blockSignals(True)
            self.saturation.setValue(int(round(saturation * 100)))
        finally:
            self.saturation.blockSignals(False)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    app = QtWidgets.QApplication([])

    widget = MyWidget()
    widget.resize(360, 420)
    widget.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
