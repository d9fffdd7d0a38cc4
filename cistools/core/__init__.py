# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Core package holding library-wide settings for cistools.
"""

from .config import SETTINGS_SCHEMA, Settings, get_settings, reset_settings

__all__ = [
    'SETTINGS_SCHEMA',
    'Settings',
    'get_settings',
    'reset_settings',
]
