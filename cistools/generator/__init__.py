# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Generator package providing cryptographically secure random strings for cistools.

This package includes:
- Character class flags and their character sets
- Random strings with per-class minimum counts
- Password and URL token shortcuts
"""

from .charsets import (
    CharacterClass, SINGLE_CLASSES, CHARSET_LOWERCASE, CHARSET_UPPERCASE,
    CHARSET_DIGITS, CHARSET_SPECIAL_PASSWORD, CHARSET_SPECIAL_URL,
    as_character_class, special_charset, resolve_charset
)
from .strings import (
    get_random_character, generate_secure_random_string, secure_password,
    secure_url_token
)

__all__ = [
    # Character classes
    'CharacterClass', 'SINGLE_CLASSES', 'CHARSET_LOWERCASE', 'CHARSET_UPPERCASE',
    'CHARSET_DIGITS', 'CHARSET_SPECIAL_PASSWORD', 'CHARSET_SPECIAL_URL',
    'as_character_class', 'special_charset', 'resolve_charset',
    
    # Generation
    'get_random_character', 'generate_secure_random_string', 'secure_password',
    'secure_url_token'
]
