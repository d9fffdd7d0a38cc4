"""
Proportion helpers: rule of three and golden-ratio splitting.
"""

import math
from enum import Enum
from typing import Tuple, Union

from ..types.errors import InvalidParameterError
from .ranges import round_half_away


GOLDEN_RATIO = (1 + math.sqrt(5)) / 2


class GoldenRatioMode(Enum):
    """Which length is passed to :func:`golden_ratio`."""
    OVERALL_GIVEN = 0   # The overall available length is given
    LONGSIDE_GIVEN = 1  # The longer part is given
    SHORTSIDE_GIVEN = 2  # The shorter part is given


def rule_of_three(rel_1x: float, rel_1y: float, rel_2x: float,
                  rounded: bool = True) -> float:
    """
    Return the value related to ``rel_2x`` like ``rel_1y`` is related to ``rel_1x``.

    Args:
        rel_1x: Known value of the first pair
        rel_1y: Related value of the first pair
        rel_2x: Known value of the second pair
        rounded: Round the result to a whole number (halves away from zero)

    Returns:
        ``rel_1y * rel_2x / rel_1x``
    """
    if rel_1x == 0:
        raise InvalidParameterError(
            "Rule of three needs a non-zero reference value.",
            parameter="rel_1x", value=rel_1x
        )
    
    result = float(rel_1y) * float(rel_2x) / float(rel_1x)
    if rounded:
        return round_half_away(result)
    return result


def golden_ratio(length: Union[int, float, str],
                 mode: GoldenRatioMode = GoldenRatioMode.OVERALL_GIVEN,
                 rounded: bool = False,
                 max_decimal_places: int = -1) -> Tuple[Union[int, float], Union[int, float]]:
    """
    Split a length by the golden ratio (a/b = (a+b)/a = phi).

    Args:
        length: The value to calculate the golden cut for (converted to float)
        mode: Which part ``length`` describes
        rounded: Truncate both parts to integers
        max_decimal_places: Round both parts to this many decimal places;
            takes precedence over ``rounded`` when >= 0

    Returns:
        Tuple of (longer part, shorter part)
    """
    length = float(length)
    max_decimal_places = int(max_decimal_places)
    
    if mode == GoldenRatioMode.LONGSIDE_GIVEN:
        result = (length, length / GOLDEN_RATIO)
    elif mode == GoldenRatioMode.SHORTSIDE_GIVEN:
        result = (length * GOLDEN_RATIO, length)
    else:
        longer = length / GOLDEN_RATIO
        result = (longer, length - longer)
    
    if max_decimal_places >= 0:
        return tuple(round_half_away(part, max_decimal_places) for part in result)
    
    if rounded:
        return tuple(int(part) for part in result)
    
    return result
