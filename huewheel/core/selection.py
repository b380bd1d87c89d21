import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from .colors import hsb_to_rgb, rgb_to_hsb
from .config import WheelConfig
from .geometry import WheelGeometry
from .math import HSBa, Point, RGBa

log = logging.getLogger(__name__)

HueSaturationCallback = Callable[[float, float], None]


class HueSaturationObserver(ABC):
    """Receives every (hue, saturation) picked by dragging on the wheel."""

    @abstractmethod
    def on_hue_saturation_selected(self, hue: float, saturation: float) -> None:
        pass


@dataclass
class IndicatorState:
    point: Optional[Point] = None
    radius: float = 8.0
    last_remembered_hue: float = 0.0


@dataclass(frozen=True)
class IndicatorGeometry:
    point: Optional[Point]
    radius: float
    fill_color: RGBa
    stroke_color: RGBa
    stroke_width: float


class SelectionState:
    """
    Current selection of a color wheel: the color, where its indicator sits
    and the remembered hue.

    Hue memory: a color that desaturates to gray reports hue 0, so the last
    non-zero hue is kept aside and put back as soon as saturation returns.

    Listeners (observers and plain callbacks) are only notified by
    update_from_pointer(); programmatic setters stay silent.
    """

    def __init__(
            self,
            geometry: WheelGeometry,
            color: HSBa | None = None,
            /, *,
            config: WheelConfig | None = None
    ):
        self._config = config or WheelConfig()
        self._geometry = geometry
        self._color = HSBa(0.0, 0.0, 1.0, 1.0)
        self._indicator = IndicatorState(radius=self._config.indicator_radius)
        self._listeners: dict[int, object] = {}
        self._next_handle = 0

        self.set_color(color if color is not None else self._color)

    # --- read-only access -------------------------------------------------
    @property
    def color(self) -> HSBa:
        return self._color

    @property
    def geometry(self) -> WheelGeometry:
        return self._geometry

    @property
    def indicator(self) -> IndicatorState:
        return self._indicator

    @property
    def config(self) -> WheelConfig:
        return self._config

    # --- listeners --------------------------------------------------------
    def add_observer(self, observer: HueSaturationObserver) -> int:
        if not isinstance(observer, HueSaturationObserver):
            raise TypeError("add_observer expects a HueSaturationObserver")
        return self._add_listener(observer)

    def add_callback(self, callback: HueSaturationCallback) -> int:
        if not callable(callback):
            raise TypeError("add_callback expects a callable(hue, saturation)")
        return self._add_listener(callback)

    def remove_listener(self, handle: int) -> bool:
        return self._listeners.pop(handle, None) is not None

    def _add_listener(self, listener) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._listeners[handle] = listener
        log.debug("Registered listener %r (handle %d)", listener, handle)
        return handle

    def _notify(self, hue: float, saturation: float) -> None:
        listeners = list(self._listeners.values())
        # observers fire before plain callbacks, each in registration order
        for listener in listeners:
            if isinstance(listener, HueSaturationObserver):
                listener.on_hue_saturation_selected(hue, saturation)
        for listener in listeners:
            if not isinstance(listener, HueSaturationObserver):
                listener(hue, saturation)

    # --- hue memory -------------------------------------------------------
    def _remember_hue(self, hue: float, saturation: float) -> float:
        if saturation == 0:
            if hue > 0:
                self._indicator.last_remembered_hue = hue
            return 0.0
        if hue == 0 and self._indicator.last_remembered_hue > 0:
            hue = self._indicator.last_remembered_hue
            self._indicator.last_remembered_hue = 0.0
        return hue

    # --- state transitions ------------------------------------------------
    def update_from_pointer(self, raw_point: Point, /) -> HSBa:
        """
        Resolve a drag position to a color (brightness pinned to 1.0), move
        the indicator there and notify listeners.
        """
        point, is_center = self._geometry.clamp_to_disc(raw_point)
        self._indicator.point = point

        hue, saturation = 0.0, 0.0
        if not is_center:
            hue, saturation = self._geometry.hue_saturation_at(self._geometry.to_raster(point))

        if saturation == 0:
            # desaturating: the hue worth keeping is the one held before this move
            hue = self._color.h
        hue = self._remember_hue(hue, saturation)
        self._color = HSBa(hue, saturation, 1.0, 1.0)

        self._notify(hue, saturation)
        return self._color

    def set_saturation(self, value: float, /) -> HSBa:
        hue = self._remember_hue(self._color.h, value)
        self._color = HSBa(hue, value, self._color.b, self._color.a)
        self._indicator.point = self._geometry.point_at(hue, value)
        return self._color

    def set_color(self, color: HSBa, /) -> HSBa:
        hue = self._remember_hue(color.h, color.s)
        self._color = color.with_hue(hue)
        self._indicator.point = self._geometry.point_at(hue, color.s)
        return self._color

    def set_rgb(self, color: RGBa, /) -> HSBa:
        """Project an arbitrary RGB color onto the wheel."""
        return self.set_color(rgb_to_hsb(color))

    def set_pressed(self, pressed: bool, /) -> None:
        if pressed:
            self._indicator.radius = self._config.pressed_indicator_radius
        else:
            self._indicator.radius = self._config.indicator_radius

    def set_geometry(self, geometry: WheelGeometry, /) -> None:
        """Swap in the geometry of a resized/rescaled wheel and re-place the indicator."""
        if geometry == self._geometry:
            return
        log.debug("Wheel geometry changed: %r -> %r", self._geometry, geometry)
        self._geometry = geometry
        self._indicator.point = geometry.point_at(self._color.h, self._color.s)

    def current_indicator_geometry(self) -> IndicatorGeometry:
        return IndicatorGeometry(
            point=self._indicator.point,
            radius=self._indicator.radius,
            fill_color=hsb_to_rgb(self._color),
            stroke_color=self._config.indicator_stroke,
            stroke_width=self._config.indicator_stroke_width,
        )
