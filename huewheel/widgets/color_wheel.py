import logging
from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from huewheel.core import HSBa, SelectionState, WheelConfig, WheelGeometry, render_cached
from huewheel.widgets.utils import bitmap_to_qimage, point_to_qpoint, qcolor_to_rgba, qpoint_to_point, rgba_to_qcolor

log = logging.getLogger(__name__)


class ColorWheelWidget(QtWidgets.QWidget):
    """
    Hue/Saturation wheel control.
    Pure view/controller: every bit of geometry and color math lives in the
    SelectionState / WheelGeometry it owns; this widget only feeds pointer
    positions in and paints what comes back.
    """

    hueSaturationSelected = QtCore.Signal(float, float)  # emitted on every drag update

    def __init__(self, color: HSBa | None = None, parent=None, *, config: WheelConfig | None = None):
        super().__init__(parent)
        self._config = config or WheelConfig()
        self._tag = -1

        # wheel cache
        self._bg = QtGui.QImage()
        self._bg_key: Optional[tuple[float, float, float]] = None

        hint = self.sizeHint()
        geometry = self._make_geometry(hint.width(), hint.height(), 1.0)
        self._selection = SelectionState(geometry, color, config=self._config)
        self._selection.add_callback(self.hueSaturationSelected.emit)

        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_TranslucentBackground, True)

    # --- public API -------------------------
    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def tag(self) -> int:
        return self._tag

    @tag.setter
    def tag(self, value: int) -> None:
        self._tag = int(value)

    def color(self) -> QtGui.QColor:
        c = self._selection.color
        return QtGui.QColor.fromHsvF(c.h, c.s, c.b, c.a)

    def setColor(self, color: QtGui.QColor | HSBa) -> None:
        self._sync_geometry()
        if isinstance(color, HSBa):
            self._selection.set_color(color)
        else:
            self._selection.set_rgb(qcolor_to_rgba(color))
        self.update()

    def setSaturation(self, value: float) -> None:
        self._sync_geometry()
        self._selection.set_saturation(float(value))
        self.update()

    # --- size hints -------------------------
    def sizeHint(self):
        return QtCore.QSize(300, 300)

    def minimumSizeHint(self):
        return QtCore.QSize(120, 120)

    # --- geometry ---------------------------
    def _make_geometry(self, width: float, height: float, dpr: float) -> Optional[WheelGeometry]:
        offset = self._config.offset
        if min(width, height) <= 2 * offset:
            return None
        return WheelGeometry.for_control(
            width, height, max(1.0, dpr),
            offset=offset,
            margin=self._config.margin,
            center_threshold=self._config.center_threshold,
        )

    def _sync_geometry(self) -> None:
        geometry = self._make_geometry(self.width(), self.height(), self.devicePixelRatioF())
        if geometry is not None:
            self._selection.set_geometry(geometry)

    def _ensure_bg_current(self) -> None:
        geo = self._selection.geometry
        key = (geo.diameter, geo.diameter, geo.device_scale)
        if self._bg.isNull() or self._bg_key != key:
            log.debug("Rebuilding wheel image for %s", key)
            bitmap = render_cached((geo.diameter, geo.diameter), geo.device_scale)
            self._bg = bitmap_to_qimage(bitmap, geo.device_scale)
            self._bg_key = key

    # --- Qt events --------------------------
    def resizeEvent(self, event):
        self._sync_geometry()
        super().resizeEvent(event)

    def mousePressEvent(self, event: QtGui.QMouseEvent):
        self._selection.set_pressed(True)
        self.update()

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent):
        self._selection.set_pressed(False)
        self.update()

    def mouseMoveEvent(self, event: QtGui.QMouseEvent):
        if not event.buttons() & QtCore.Qt.MouseButton.LeftButton:
            return
        self._sync_geometry()
        self._selection.update_from_pointer(qpoint_to_point(event.position()))
        self.update()

    def paintEvent(self, event):
        self._sync_geometry()
        self._ensure_bg_current()

        origin = self._selection.geometry.origin
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QtGui.QPainter.RenderHint.SmoothPixmapTransform, True)
        painter.drawImage(point_to_qpoint(origin), self._bg)

        ind = self._selection.current_indicator_geometry()
        if ind.point is not None:
            pen = QtGui.QPen(rgba_to_qcolor(ind.stroke_color))
            pen.setWidthF(ind.stroke_width)
            painter.setPen(pen)
            painter.setBrush(rgba_to_qcolor(ind.fill_color))
            painter.drawEllipse(point_to_qpoint(ind.point), ind.radius, ind.radius)
        painter.end()
