"""
Common types shared across cistools packages.
Provides the tuple and mapping shapes returned by the color conversions.
"""

from typing import Dict, Tuple


# Color representations
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, float]
HSL = Tuple[int, int, int]
HSLA = Tuple[int, int, int, float]
HSV = Tuple[float, float, float]
CMYK = Dict[str, float]

# Bounds of the packed 24-bit color integer
COLOR_MIN = 0x0
COLOR_MAX = 0xFFFFFF  # 256^3 possible colors
CHANNEL_MAX = 255
