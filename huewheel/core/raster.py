import logging
import math
import time
from dataclasses import dataclass
from functools import lru_cache

from .colors import hsb_to_rgb
from .geometry import WheelGeometry
from .math import HSBa, Size

log = logging.getLogger(__name__)

ANTIALIAS_START = 0.99
ANTIALIAS_STEEPNESS = 100.0


@dataclass(frozen=True)
class WheelBitmap:
    """
    Immutable RGBA8 pixel buffer, row-major, 4 bytes per pixel
    (pixel (x, y) starts at byte 4 * (x + y * width)).
    """
    width: int
    height: int
    data: bytes

    @property
    def bytes_per_line(self) -> int:
        return self.width * 4

    def pixel(self, x: int, y: int, /) -> tuple[int, int, int, int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError((x, y))
        offset = 4 * (x + y * self.width)
        r, g, b, a = self.data[offset:offset + 4]
        return r, g, b, a


def edge_alpha(saturation: float) -> float:
    """
    Alpha for a wheel pixel: opaque inside, a steep ~1% ramp right before
    the rim, transparent on and past the rim.
    """
    if saturation >= 1.0:
        return 0.0
    if saturation > ANTIALIAS_START:
        return max(0.0, min(1.0, (1.0 - saturation) * ANTIALIAS_STEEPNESS))
    return 1.0


def render(size: Size, device_scale: float = 1.0, /) -> WheelBitmap:
    """
    Rasterize the full hue/saturation disc (brightness fixed at 1.0) into a
    square bitmap of side floor(min(w, h) * device_scale).
    """
    w, h = size
    dimension = int(math.floor(min(w, h) * device_scale))
    if dimension <= 0:
        raise ValueError(f"Cannot render a wheel of size {size!r} at scale {device_scale!r}")

    radius = min(w, h) / 2.0
    geometry = WheelGeometry((radius, radius), radius, device_scale)

    started = time.perf_counter()
    buf = bytearray(dimension * dimension * 4)
    # Note: iterate rows then columns for cache locality
    for y in range(dimension):
        for x in range(dimension):
            hue, saturation = geometry.hue_saturation_at((x, y))
            alpha = edge_alpha(saturation)
            if alpha <= 0.0:
                continue  # leave fully transparent
            rgba = hsb_to_rgb(HSBa(hue, saturation, 1.0, alpha)).to_rgba8()
            offset = 4 * (x + y * dimension)
            buf[offset:offset + 4] = bytes(rgba)

    log.debug("Rendered %dx%d wheel (scale %.2f) in %.1f ms",
              dimension, dimension, device_scale, (time.perf_counter() - started) * 1000.0)
    return WheelBitmap(dimension, dimension, bytes(buf))


@lru_cache(maxsize=8)
def render_cached(size: Size, device_scale: float = 1.0, /) -> WheelBitmap:
    """Memoized render(), keyed on (size, device_scale)."""
    return render((float(size[0]), float(size[1])), float(device_scale))
