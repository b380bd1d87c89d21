import math

from .math import HSBa, RGBa, clamp01


def hsb_to_rgb(color: HSBa, /) -> RGBa:
    """
    Canonical six-sector HSB -> RGB conversion.

    Inputs are clamped to [0, 1] first (hue is wrapped, 1.0 is the same
    angle as 0.0), so small overshoots from the geometry never leak out.
    """
    h = color.h % 1.0 if math.isfinite(color.h) else 0.0
    s = clamp01(color.s)
    v = clamp01(color.b)
    a = clamp01(color.a)

    if s == 0.0:
        return RGBa(v, v, v, a)

    h6 = h * 6.0
    i = int(math.floor(h6)) % 6
    f = h6 - math.floor(h6)
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    if i == 0:
        r, g, b = v, t, p
    elif i == 1:
        r, g, b = q, v, p
    elif i == 2:
        r, g, b = p, v, t
    elif i == 3:
        r, g, b = p, q, v
    elif i == 4:
        r, g, b = t, p, v
    else:  # i == 5
        r, g, b = v, p, q

    return RGBa(clamp01(r), clamp01(g), clamp01(b), a)


def rgb_to_hsb(color: RGBa, /) -> HSBa:
    # Input: r,g,b,a in [0,1] (clamped)
    # Output: h in [0,1), s,b,a in [0,1]; achromatic colors get h = 0
    rf = clamp01(color.r)
    gf = clamp01(color.g)
    bf = clamp01(color.b)

    cmax = max(rf, gf, bf)
    cmin = min(rf, gf, bf)
    delta = cmax - cmin

    # Hue
    if delta == 0:
        h = 0.0
    elif cmax == rf:
        h = (((gf - bf) / delta) % 6.0) / 6.0
    elif cmax == gf:
        h = (((bf - rf) / delta) + 2.0) / 6.0
    else:  # cmax == bf
        h = (((rf - gf) / delta) + 4.0) / 6.0

    # Saturation
    s = 0.0 if cmax == 0 else delta / cmax

    return HSBa(h % 1.0, clamp01(s), cmax, clamp01(color.a))


def to_rgba8(color: RGBa, /) -> tuple[int, int, int, int]:
    return color.to_rgba8()
