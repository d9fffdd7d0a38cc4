"""
Color space conversions between packed integers, RGB, HSL, HSV and CMYK.

All functions are pure. Inputs are clamped into their valid range instead of
being rejected.

Ranges:
- RGB channels are integers in [0, 255]
- HSL is hue in degrees [0, 360], saturation and lightness in percent [0, 100]
- HSV components are floats in [0, 1]
- CMYK components are percentages in [0, 100]
"""

import math

from ..numeric.ranges import clamp_int, clamp_float, round_half_away
from ..types.common import RGB, HSL, HSV, CMYK, COLOR_MIN, COLOR_MAX, CHANNEL_MAX


def rgb_to_int(red: int, green: int, blue: int) -> int:
    """Pack RGB channels into a 24-bit integer."""
    red = clamp_int(red, 0, CHANNEL_MAX)
    green = clamp_int(green, 0, CHANNEL_MAX)
    blue = clamp_int(blue, 0, CHANNEL_MAX)

    return red * 0x10000 + green * 0x100 + blue


def int_to_rgb(color: int) -> RGB:
    """Unpack a 24-bit integer into RGB channels."""
    color = clamp_int(color, COLOR_MIN, COLOR_MAX)
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        hue: Hue in degrees [0, 360]
        saturation: Saturation in percent [0, 100]
        lightness: Lightness in percent [0, 100]

    Returns:
        Tuple of (red, green, blue)
    """
    h = clamp_float(hue, 0.0, 360.0)
    s = clamp_float(saturation, 0.0, 100.0)
    l = clamp_float(lightness, 0.0, 100.0)

    c = (1 - abs(2 * (l / 100) - 1)) * s / 100
    x = c * (1 - abs(math.fmod(h / 60, 2) - 1))
    m = (l / 100) - (c / 2)

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        clamp_int(math.floor((r + m) * 255), 0, CHANNEL_MAX),
        clamp_int(math.floor((g + m) * 255), 0, CHANNEL_MAX),
        clamp_int(math.floor((b + m) * 255), 0, CHANNEL_MAX),
    )


def rgb_to_hsl(red: int, green: int, blue: int) -> HSL:
    """
    Convert RGB to HSL.

    Returns:
        Tuple of (hue degrees, saturation percent, lightness percent), each
        rounded to an integer
    """
    r = clamp_int(red, 0, CHANNEL_MAX) / 255
    g = clamp_int(green, 0, CHANNEL_MAX) / 255
    b = clamp_int(blue, 0, CHANNEL_MAX) / 255

    high = max(r, g, b)
    low = min(r, g, b)
    l = (high + low) / 2

    if high == low:
        h = s = 0.0
    else:
        d = high - low
        s = d / (1 - abs(2 * l - 1))
        if high == r:
            h = 60 * math.fmod((g - b) / d, 6)
            if b > g:
                h += 360
        elif high == g:
            h = 60 * ((b - r) / d + 2)
        else:
            h = 60 * ((r - g) / d + 4)

    return (
        int(round_half_away(h)),
        int(round_half_away(s * 100)),
        int(round_half_away(l * 100)),
    )


def hsv_to_rgb(hue: float, saturation: float, value: float) -> RGB:
    """
    Convert HSV to RGB.

    Conversion formula adapted from http://en.wikipedia.org/wiki/HSV_color_space.
    Assumes h, s and v are contained in [0, 1] and returns r, g and b in
    [0, 255].
    """
    h = clamp_float(hue, 0.0, 1.0)
    s = clamp_float(saturation, 0.0, 1.0)
    v = clamp_float(value, 0.0, 1.0)

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sextant = i % 6
    if sextant == 0:
        r, g, b = v, t, p
    elif sextant == 1:
        r, g, b = q, v, p
    elif sextant == 2:
        r, g, b = p, v, t
    elif sextant == 3:
        r, g, b = p, q, v
    elif sextant == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return (
        int(round_half_away(r * 255)),
        int(round_half_away(g * 255)),
        int(round_half_away(b * 255)),
    )


def rgb_to_hsv(red: int, green: int, blue: int) -> HSV:
    """
    Convert RGB to HSV.

    Conversion formula adapted from http://en.wikipedia.org/wiki/HSV_color_space.
    Returns h, s and v in [0, 1].
    """
    r = clamp_int(red, 0, CHANNEL_MAX) / 255
    g = clamp_int(green, 0, CHANNEL_MAX) / 255
    b = clamp_int(blue, 0, CHANNEL_MAX) / 255

    high = max(r, g, b)
    low = min(r, g, b)
    d = high - low

    v = high
    s = 0.0 if high == 0 else d / high

    if high == low:
        h = 0.0  # achromatic
    else:
        if high == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return h, s, v


def rgb_to_cmyk(red: int, green: int, blue: int) -> CMYK:
    """Convert RGB to CMYK percentages, keyed by 'c', 'm', 'y' and 'k'."""
    c = (255 - clamp_int(red, 0, CHANNEL_MAX)) / 255.0 * 100
    m = (255 - clamp_int(green, 0, CHANNEL_MAX)) / 255.0 * 100
    y = (255 - clamp_int(blue, 0, CHANNEL_MAX)) / 255.0 * 100

    k = min(c, m, y)

    return {'c': c - k, 'm': m - k, 'y': y - k, 'k': k}


def cmyk_to_rgb(cyan: float, magenta: float, yellow: float, key: float) -> RGB:
    """Convert CMYK percentages to RGB."""
    c = clamp_float(cyan, 0.0, 100.0) / 100
    m = clamp_float(magenta, 0.0, 100.0) / 100
    y = clamp_float(yellow, 0.0, 100.0) / 100
    k = clamp_float(key, 0.0, 100.0) / 100

    return (
        int(round_half_away(255 * (1 - c) * (1 - k))),
        int(round_half_away(255 * (1 - m) * (1 - k))),
        int(round_half_away(255 * (1 - y) * (1 - k))),
    )
