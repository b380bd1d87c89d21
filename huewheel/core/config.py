from dataclasses import dataclass, field

from .math import RGBa


@dataclass(frozen=True)
class WheelConfig:
    """
    Layout and indicator constants of a color wheel control.

      - offset: inset of the disc from every edge of the control
      - margin: additive inset used when placing the indicator for a color
      - indicator_radius / pressed_indicator_radius: marker radius while idle / pressed
      - center_threshold: dead-zone radius (wheel units) that snaps to the center
    """
    offset: float = 15.0
    margin: float = 20.0
    indicator_radius: float = 8.0
    pressed_indicator_radius: float = 10.0
    center_threshold: float = 5.0
    indicator_stroke: RGBa = field(default_factory=lambda: RGBa(0.5, 0.5, 0.5, 1.0))
    indicator_stroke_width: float = 1.0

    def __post_init__(self):
        if self.offset < 0 or self.margin < 0:
            raise ValueError("offset and margin must be >= 0.")
        if self.indicator_radius <= 0 or self.pressed_indicator_radius <= 0:
            raise ValueError("Indicator radii must be > 0.")
        if self.center_threshold < 0:
            raise ValueError("center_threshold must be >= 0.")
        if self.indicator_stroke_width < 0:
            raise ValueError("indicator_stroke_width must be >= 0.")
