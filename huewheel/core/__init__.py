from .math import Point, Size, HSBa, RGBa, clamp01
from .colors import hsb_to_rgb, rgb_to_hsb, to_rgba8
from .config import WheelConfig
from .geometry import WheelGeometry
from .raster import WheelBitmap, render, render_cached
from .selection import (
    HueSaturationObserver,
    IndicatorGeometry,
    IndicatorState,
    SelectionState,
)

__all__ = [
    "Point",
    "Size",
    "HSBa",
    "RGBa",
    "clamp01",
    "hsb_to_rgb",
    "rgb_to_hsb",
    "to_rgba8",
    "WheelConfig",
    "WheelGeometry",
    "WheelBitmap",
    "render",
    "render_cached",
    "HueSaturationObserver",
    "IndicatorGeometry",
    "IndicatorState",
    "SelectionState",
]
