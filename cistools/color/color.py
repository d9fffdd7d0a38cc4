"""
Color value object for cistools.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

Representations supported:
- Int is the packed integer representation
- Hex is the hexadecimal string
- RGB is a tuple of (red, green, blue)
- RGBA is a tuple of (red, green, blue, alpha)
- HSL is a tuple of (hue, saturation, lightness)
- HSLA is a tuple of (hue, saturation, lightness, alpha)
- HSV is a tuple of (hue, saturation, value)
- CMYK is a dict with keys 'c', 'm', 'y', 'k'
"""

from dataclasses import dataclass, replace

from ..numeric.ranges import clamp_int, clamp_float
from ..types.common import RGB, RGBA, HSL, HSLA, HSV, CMYK, COLOR_MIN, COLOR_MAX
from . import conversions
from .hex import DEFAULT_HEX_COLOR, parse_hex_color, alpha_to_hex


@dataclass
class Color:
    """
    One RGBA color: a packed 24-bit integer plus a separate alpha.

    Every setter clamps its input, so the color is always valid. A new
    instance is black and fully opaque.
    """
    value: int = 0x0
    alpha: float = 1.0

    def __post_init__(self):
        self.value = clamp_int(self.value, COLOR_MIN, COLOR_MAX)
        self.alpha = clamp_float(self.alpha, 0.0, 1.0)

    @classmethod
    def from_hex(cls, code: str) -> "Color":
        """Create a color from hex notation."""
        color = cls()
        color.set_from_hex_string(code)
        return color

    @classmethod
    def from_rgba(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> "Color":
        """Create a color from RGB channels and alpha."""
        color = cls()
        color.set_from_rgba(red, green, blue, alpha)
        return color

    def copy(self) -> "Color":
        """Return an independent copy of this color."""
        return replace(self)

    def _commit(self, value: int, alpha: float) -> None:
        self.value = clamp_int(value, COLOR_MIN, COLOR_MAX)
        self.alpha = clamp_float(alpha, 0.0, 1.0)

    # Setters

    def set_from_packed_int(self, value: int, alpha: float = 1.0) -> None:
        self._commit(value, alpha)

    def set_from_hex_string(self, code: str, default: str = DEFAULT_HEX_COLOR) -> None:
        """
        Set the color from hex notation (#RGB, #RGBA, #RRGGBB, #RRGGBBA, #RRGGBBAA).

        Unusable input sets ``default`` (opaque white) instead of raising.
        """
        value, alpha = parse_hex_color(code, default)
        self._commit(value, alpha)

    def set_from_rgba(self, red: int, green: int, blue: int, alpha: float = 1.0) -> None:
        self._commit(conversions.rgb_to_int(red, green, blue), alpha)

    def set_alpha(self, alpha: float = 1.0) -> None:
        self.alpha = clamp_float(alpha, 0.0, 1.0)

    def set_from_hsla(self, hue: float, saturation: float, lightness: float,
                      alpha: float = 1.0) -> None:
        """Set the color from hue degrees, saturation and lightness percent."""
        red, green, blue = conversions.hsl_to_rgb(hue, saturation, lightness)
        self.set_from_rgba(red, green, blue, alpha)

    def set_from_hsv(self, hue: float, saturation: float, value: float) -> None:
        """Set the color from HSV components in [0, 1]; the color becomes opaque."""
        red, green, blue = conversions.hsv_to_rgb(hue, saturation, value)
        self.set_from_rgba(red, green, blue, 1.0)

    def set_from_cmyk(self, cyan: float, magenta: float, yellow: float, key: float) -> None:
        """Set the color from CMYK percentages; the color becomes opaque."""
        red, green, blue = conversions.cmyk_to_rgb(cyan, magenta, yellow, key)
        self.set_from_rgba(red, green, blue, 1.0)

    # Getters

    def get_packed_int(self) -> int:
        return self.value

    def get_rgb(self) -> RGB:
        return conversions.int_to_rgb(self.value)

    def get_rgba(self) -> RGBA:
        return self.get_rgb() + (self.alpha,)

    def get_hsl(self) -> HSL:
        return conversions.rgb_to_hsl(*self.get_rgb())

    def get_hsla(self) -> HSLA:
        return self.get_hsl() + (self.alpha,)

    def get_hsv(self) -> HSV:
        return conversions.rgb_to_hsv(*self.get_rgb())

    def get_cmyk(self) -> CMYK:
        return conversions.rgb_to_cmyk(*self.get_rgb())

    # Helpers

    def is_dark(self, threshold: float = 127.0) -> bool:
        """
        Check whether the color is dark.

        Args:
            threshold: Brightness threshold in [0, 256]; it is scaled to the
                lightness percentage range

        Returns:
            True if the HSL lightness is at or below the scaled threshold
        """
        threshold = clamp_float(threshold, 0.0, 256.0)
        relative = threshold * 100.0 / 256.0
        return self.get_hsl()[2] <= relative

    # Formatters

    def get_hex_alpha(self) -> str:
        return alpha_to_hex(self.alpha)

    def get_hex_string(self, with_alpha: bool = False) -> str:
        """Return six hex digits, followed by two alpha digits if requested."""
        hex_string = f"{self.value:06x}"
        if with_alpha:
            hex_string += self.get_hex_alpha()
        return hex_string

    def get_css_hex(self, with_alpha: bool = False) -> str:
        return f"#{self.get_hex_string(with_alpha)}"

    def get_css_rgba(self) -> str:
        red, green, blue = self.get_rgb()
        alpha = repr(self.alpha)
        if alpha.endswith(".0"):
            alpha = alpha[:-2]
        return f"rgba({red},{green},{blue},{alpha})"
