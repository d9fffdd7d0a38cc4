"""
cistools Python Package

Helper library: secure random strings, color conversions and numeric helpers.
"""

__version__ = "0.1.0"

from .color import Color
from .core.config import Settings, get_settings, reset_settings
from .generator import (
    CharacterClass,
    generate_secure_random_string,
    get_random_character,
    secure_password,
    secure_url_token,
)
from .numeric import clamp_int, clamp_float, golden_ratio, rule_of_three, GoldenRatioMode
from .types.errors import CisToolsError, InvalidParameterError, ConfigurationError

__all__ = [
    "Color",
    "Settings",
    "get_settings",
    "reset_settings",
    "CharacterClass",
    "generate_secure_random_string",
    "get_random_character",
    "secure_password",
    "secure_url_token",
    "clamp_int",
    "clamp_float",
    "golden_ratio",
    "rule_of_three",
    "GoldenRatioMode",
    "CisToolsError",
    "InvalidParameterError",
    "ConfigurationError",
]
