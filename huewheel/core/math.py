from dataclasses import dataclass

Point = tuple[float, float]
Size = tuple[float, float]


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def clamp_byte(value: float) -> int:
    return max(0, min(255, int(round(value * 255.0))))


@dataclass(frozen=True)
class HSBa:
    """
    Pure-theory color container (HSB + alpha), every channel a fraction:
      - h: [0, 1), circular (0 and 1 are the same angle)
      - s, b, a: [0, 1]
    """
    h: float = 0.0
    s: float = 0.0
    b: float = 1.0
    a: float = 1.0

    def to_hsba(self, /) -> tuple[float, float, float, float]:
        return self.h, self.s, self.b, self.a

    def with_hue(self, h: float) -> "HSBa":
        return HSBa(h, self.s, self.b, self.a)

    def with_saturation(self, s: float) -> "HSBa":
        return HSBa(self.h, s, self.b, self.a)


@dataclass(frozen=True)
class RGBa:
    """
    Pure-theory color container (RGB + alpha), every channel in [0, 1].
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgba(self, /) -> tuple[float, float, float, float]:
        return self.r, self.g, self.b, self.a

    def to_rgba8(self, /) -> tuple[int, int, int, int]:
        return clamp_byte(self.r), clamp_byte(self.g), clamp_byte(self.b), clamp_byte(self.a)

    @staticmethod
    def from_rgba8(r: int, g: int, b: int, a: int = 255) -> "RGBa":
        return RGBa(r / 255.0, g / 255.0, b / 255.0, a / 255.0)
