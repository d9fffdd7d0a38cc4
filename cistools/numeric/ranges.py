"""
Range utilities for cistools.
Keeps numbers inside a closed interval instead of rejecting them.
"""

import math
from typing import Optional


def clamp_int(value: int, minimum: Optional[int] = None,
              maximum: Optional[int] = None) -> int:
    """
    Clamp an integer into ``[minimum, maximum]``.

    A bound of ``None`` leaves that side open, so ``clamp_int(x)`` returns ``x``.
    The lower bound is tested first. Float input is clamped before it is
    truncated, so NaN and infinities land on a bound.
    """
    if isinstance(value, float):
        value = clamp_float(value, minimum, maximum)
    value = int(value)
    
    if minimum is not None and value < minimum:
        return int(minimum)
    
    if maximum is not None and value > maximum:
        return int(maximum)
    
    return value


def clamp_float(value: float, minimum: Optional[float] = None,
                maximum: Optional[float] = None) -> float:
    """
    Clamp a float into ``[minimum, maximum]``; ``None`` leaves that side open.

    NaN is treated as the lower bound, or 0.0 when there is none.
    """
    value = float(value)
    if math.isnan(value):
        value = 0.0 if minimum is None else float(minimum)
    
    if minimum is not None and value < minimum:
        return float(minimum)
    
    if maximum is not None and value > maximum:
        return float(maximum)
    
    return value


def round_half_away(value: float, places: int = 0) -> float:
    """
    Round to the given number of decimal places, halves away from zero.

    The builtin ``round`` rounds halves to even, which would turn 0.5 into 0.
    """
    factor = 10 ** places
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    return math.copysign(rounded, value)
