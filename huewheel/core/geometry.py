import math
from dataclasses import dataclass
from typing import Tuple

from .math import Point

CENTER_THRESHOLD = 5.0
FULL_SATURATION_TOLERANCE = 0.98


@dataclass(frozen=True)
class WheelGeometry:
    """
    Hue-Saturation disc, centered at `center` with radius `radius` in local
    (view) coordinates; `device_scale` maps local units to raster pixels.

    Two frames are involved and they are not exact inverses of each other:
      - hue_saturation_at works in raster space relative to the disc's
        raster radius (disc top-left at raster (0, 0));
      - point_at works in local space relative to the diameter, shifted by
        the additive `margin`.
    The indicator placement has been tuned against the second frame, so
    the small disagreement at the margin is kept.

    Mapping:
      - hue = angle from +X axis, [0, 1), lower half-plane mirrored
      - saturation = radial distance / radius, snapped to 1.0 above 0.98
    """
    center: Point
    radius: float
    device_scale: float = 1.0
    origin: Point | None = None
    margin: float = 0.0
    center_threshold: float = CENTER_THRESHOLD

    def __post_init__(self):
        if not self.radius > 0:
            raise ValueError(f"Wheel radius must be > 0, got {self.radius!r}")
        if not self.device_scale >= 1:
            raise ValueError(f"Device scale must be >= 1, got {self.device_scale!r}")
        if self.origin is None:
            cx, cy = self.center
            object.__setattr__(self, "origin", (cx - self.radius, cy - self.radius))

    @staticmethod
    def for_control(
            width: float,
            height: float,
            device_scale: float = 1.0,
            /, *,
            offset: float = 15.0,
            margin: float = 20.0,
            center_threshold: float = CENTER_THRESHOLD
    ) -> "WheelGeometry":
        """
        Lay the disc out inside a control of the given size: the disc area is
        the control inset by `offset` on every side.
        """
        w = float(width) - 2 * offset
        h = float(height) - 2 * offset
        radius = min(w, h) / 2
        return WheelGeometry(
            (offset + radius, offset + radius),
            radius,
            device_scale,
            origin=(offset, offset),
            margin=margin,
            center_threshold=center_threshold,
        )

    # --- Geometry helpers

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius

    @property
    def raster_radius(self) -> float:
        return self.radius * self.device_scale

    @property
    def raster_size(self) -> int:
        return int(math.floor(self.diameter * self.device_scale))

    def to_raster(self, point: Point, /) -> Point:
        ox, oy = self.origin
        return (point[0] - ox) * self.device_scale, (point[1] - oy) * self.device_scale

    # --- Pointer clamping

    def clamp_to_disc(self, point: Point, /) -> Tuple[Point, bool]:
        """
        Keep a pointer on the wheel: points outside are projected onto the
        rim along the same angle, points inside the center dead-zone snap to
        the exact center (reported with is_center=True).
        """
        cx, cy = self.center
        dx = point[0] - cx
        dy = point[1] - cy
        distance = math.hypot(dx, dy)
        out = (float(point[0]), float(point[1]))

        if distance > self.radius:
            theta = math.atan2(dy, dx)
            out = (cx + self.radius * math.cos(theta), cy + self.radius * math.sin(theta))
            distance = self.radius

        if distance < self.center_threshold:
            return (float(cx), float(cy)), True
        return out, False

    # --- Forward mapping: raster (x, y) -> (hue, saturation)

    def hue_saturation_at(self, raster_point: Point, /) -> Tuple[float, float]:
        ratio = self.raster_radius
        dx = (raster_point[0] - ratio) / ratio
        dy = (raster_point[1] - ratio) / ratio
        delta = math.sqrt(dx * dx + dy * dy)

        saturation = delta
        if saturation > FULL_SATURATION_TOLERANCE:
            saturation = 1.0

        if delta == 0:
            hue = 0.0
        else:
            # rounding can push dx/delta a hair past 1
            hue = math.acos(max(-1.0, min(1.0, dx / delta))) / (2.0 * math.pi)
            if dy < 0:
                # tiny negative dy gives 1.0, which is hue 0
                hue = (1.0 - hue) % 1.0
        return hue, saturation

    # --- Inverse mapping: (hue, saturation) -> local (x, y)

    def point_at(self, hue: float, saturation: float, /) -> Point:
        half = self.diameter / 2
        r = saturation * half
        angle = hue * math.pi * 2
        x = half + r * math.cos(angle) + self.margin
        y = half + r * math.sin(angle) + self.margin
        return x, y
