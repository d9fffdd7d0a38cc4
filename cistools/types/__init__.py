# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package types provides shared type definitions for cistools.

This package contains common types used across multiple packages to avoid duplication:
- Color tuple shapes and bounds
- Error codes and the exception hierarchy
"""

from .common import (
    # Color shapes
    RGB,
    RGBA,
    HSL,
    HSLA,
    HSV,
    CMYK,
    
    # Bounds
    COLOR_MIN,
    COLOR_MAX,
    CHANNEL_MAX,
)

from .errors import (
    ErrorCode,
    CisToolsError,
    InvalidParameterError,
    ConfigurationError,
)

__all__ = [
    # Color shapes
    'RGB', 'RGBA', 'HSL', 'HSLA', 'HSV', 'CMYK',
    
    # Bounds
    'COLOR_MIN', 'COLOR_MAX', 'CHANNEL_MAX',
    
    # Errors
    'ErrorCode', 'CisToolsError', 'InvalidParameterError', 'ConfigurationError',
]
