from PySide6 import QtCore, QtGui

from huewheel.core import Point, RGBa, WheelBitmap


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())

def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])

def rgba_to_qcolor(color: RGBa) -> QtGui.QColor:
    r, g, b, a = color.to_rgba8()
    return QtGui.QColor(r, g, b, a)

def qcolor_to_rgba(qcolor: QtGui.QColor) -> RGBa:
    return RGBa.from_rgba8(qcolor.red(), qcolor.green(), qcolor.blue(), qcolor.alpha())

def bitmap_to_qimage(bitmap: WheelBitmap, dpr: float = 1.0) -> QtGui.QImage:
    img = QtGui.QImage(
        bitmap.data, bitmap.width, bitmap.height, bitmap.bytes_per_line,
        QtGui.QImage.Format.Format_RGBA8888,
    )
    # QImage does not own the buffer it wraps
    img = img.copy()
    img.setDevicePixelRatio(dpr)
    return img
