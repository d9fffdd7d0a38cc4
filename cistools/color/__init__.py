# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Color package providing conversions between color representations for cistools.

This package includes:
- The Color value object (packed RGB integer plus alpha)
- Pure conversions between RGB, HSL, HSV and CMYK
- Hex notation parsing and sanitizing with a white fallback
"""

from .color import Color
from .conversions import (
    rgb_to_int, int_to_rgb, hsl_to_rgb, rgb_to_hsl, hsv_to_rgb,
    rgb_to_hsv, rgb_to_cmyk, cmyk_to_rgb
)
from .hex import (
    DEFAULT_HEX_COLOR, sanitize_hex_string, hex_to_alpha, alpha_to_hex,
    hex_to_int, parse_hex_color
)

__all__ = [
    # Value object
    'Color',
    
    # Conversions
    'rgb_to_int', 'int_to_rgb', 'hsl_to_rgb', 'rgb_to_hsl', 'hsv_to_rgb',
    'rgb_to_hsv', 'rgb_to_cmyk', 'cmyk_to_rgb',
    
    # Hex notation
    'DEFAULT_HEX_COLOR', 'sanitize_hex_string', 'hex_to_alpha', 'alpha_to_hex',
    'hex_to_int', 'parse_hex_color'
]
