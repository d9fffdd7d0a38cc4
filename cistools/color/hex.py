"""
Hexadecimal color notation helpers.

Accepted notations, with or without leading hashtag:
- RGB, RRGGBB
- RGBA, RRGGBBA, RRGGBBAA

The alpha digits are read as a hex number holding a percentage: the value is
clamped to [0, 100] and divided by 100, so ``32`` (50) is half transparent and
anything from ``64`` (100) upwards is opaque.

Parsing never raises. Anything unusable resolves to the default color.
"""

import logging
import re
from typing import Any, Tuple

from ..numeric.ranges import clamp_int, clamp_float, round_half_away

logger = logging.getLogger(__name__)

DEFAULT_HEX_COLOR = "#ffffff"

_HEX_COLOR_PATTERN = re.compile(r'^[A-Fa-f0-9]+$')
_VALID_LENGTHS = (3, 4, 6, 7, 8)


def _strip_hashtag(code: str) -> str:
    return code.strip().lstrip('#')


def _is_hex_color(code: Any) -> bool:
    return (isinstance(code, str) and len(code) in _VALID_LENGTHS
            and bool(_HEX_COLOR_PATTERN.match(code)))


def sanitize_hex_string(color: Any, default: str = DEFAULT_HEX_COLOR) -> str:
    """
    Return ``color`` as a hashtag-prefixed hex color, or ``default`` if it is unusable.

    Args:
        color: The color to sanitize in hex notation
        default: Default color to return if color is not usable

    Returns:
        A hex color prefixed with hashtag (e.g. #ffffff)
    """
    if isinstance(color, str):
        code = _strip_hashtag(color)
        if _is_hex_color(code):
            return f"#{code.lower()}"

    logger.debug(f"Unusable hex color {color!r}, falling back to {default}")
    return default


def hex_to_alpha(code: str) -> float:
    """
    Convert alpha hex digits to an alpha value in [0, 1].

    A single digit is doubled first (``8`` -> ``88``).
    """
    code = _strip_hashtag(code) if isinstance(code, str) else ""
    if len(code) == 1:
        code += code

    if not code or not _HEX_COLOR_PATTERN.match(code):
        return 1.0

    return clamp_int(int(code, 16), 0, 100) / 100.0


def alpha_to_hex(alpha: float) -> str:
    """Convert an alpha value to two hex digits; inverse of :func:`hex_to_alpha`."""
    percent = int(round_half_away(clamp_float(alpha, 0.0, 1.0) * 100))
    return f"{percent:02x}"


def hex_to_int(code: str) -> int:
    """Convert 3 or 6 hex digits (optionally prefixed with hashtag) to a packed color."""
    code = _strip_hashtag(code)

    if len(code) == 3:
        code = code[0] * 2 + code[1] * 2 + code[2] * 2

    return int(code[:6], 16)


def parse_hex_color(code: Any, default: str = DEFAULT_HEX_COLOR) -> Tuple[int, float]:
    """
    Parse a hex color with optional alpha.

    Args:
        code: Hex color in any accepted notation
        default: Color used when ``code`` is not usable; must itself be valid,
            otherwise opaque white is used

    Returns:
        Tuple of (packed color, alpha)
    """
    digits = _strip_hashtag(code) if isinstance(code, str) else None
    if not _is_hex_color(digits):
        digits = sanitize_hex_string(default, DEFAULT_HEX_COLOR)[1:]
        logger.debug(f"Unusable hex color {code!r}, using #{digits}")

    if len(digits) in (3, 4):
        color_digits, alpha_digits = digits[:3], digits[3:]
    else:
        color_digits, alpha_digits = digits[:6], digits[6:]

    alpha = hex_to_alpha(alpha_digits) if alpha_digits else 1.0
    return hex_to_int(color_digits), alpha
