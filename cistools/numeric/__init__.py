# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Numeric package providing range and proportion helpers for cistools.

This package includes:
- Clamping of integers and floats into closed intervals
- Rounding with halves away from zero
- Rule of three and golden-ratio splitting
"""

from .ranges import clamp_int, clamp_float, round_half_away
from .ratios import GOLDEN_RATIO, GoldenRatioMode, rule_of_three, golden_ratio

__all__ = [
    # Range utilities
    'clamp_int', 'clamp_float', 'round_half_away',
    
    # Proportion utilities
    'GOLDEN_RATIO', 'GoldenRatioMode', 'rule_of_three', 'golden_ratio',
]
