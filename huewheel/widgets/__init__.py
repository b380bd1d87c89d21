from .color_wheel import ColorWheelWidget
from .utils import bitmap_to_qimage, point_to_qpoint, qcolor_to_rgba, qpoint_to_point, rgba_to_qcolor

__all__ = [
    "ColorWheelWidget",
    "bitmap_to_qimage",
    "point_to_qpoint",
    "qcolor_to_rgba",
    "qpoint_to_point",
    "rgba_to_qcolor",
]
