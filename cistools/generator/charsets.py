"""
Character classes and character sets used by the secure string generator.
"""

import re
import string
from enum import Flag


class CharacterClass(Flag):
    """Classes of characters; combine them with ``|``."""
    NONE = 0
    LOWERCASE = 0x1
    UPPERCASE = 0x2
    DIGITS = 0x4
    SPECIAL = 0x8
    ALL = LOWERCASE | UPPERCASE | DIGITS | SPECIAL


SINGLE_CLASSES = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGITS,
    CharacterClass.SPECIAL,
)

# Character sets alnum
CHARSET_LOWERCASE = string.ascii_lowercase
CHARSET_UPPERCASE = string.ascii_uppercase
CHARSET_DIGITS = string.digits

# Other character sets
# OWASP password special characters (https://owasp.org/www-community/password-special-characters)
CHARSET_SPECIAL_PASSWORD = ' !"#$%&\'()*+,-./:;<=>?@[\\]^_`{|}~'
CHARSET_SPECIAL_URL = "$-_'.+!*(),"

_ALNUM_PATTERN = re.compile(r'[a-zA-Z0-9]+')

_CLASS_CHARSETS = {
    CharacterClass.LOWERCASE: CHARSET_LOWERCASE,
    CharacterClass.UPPERCASE: CHARSET_UPPERCASE,
    CharacterClass.DIGITS: CHARSET_DIGITS,
}


def as_character_class(value) -> CharacterClass:
    """Coerce a flag or raw int to a CharacterClass, dropping unknown bits."""
    if isinstance(value, CharacterClass):
        return value
    return CharacterClass(int(value) & CharacterClass.ALL.value)


def special_charset(allowed_special_chars: str) -> str:
    """Strip alphanumerics from a caller supplied set of special characters."""
    return _ALNUM_PATTERN.sub('', allowed_special_chars or '')


def resolve_charset(classes: CharacterClass = CharacterClass.ALL,
                    allowed_special_chars: str = "") -> str:
    """
    Return every character usable for ``classes``, each exactly once.

    The special class only contributes ``allowed_special_chars`` (minus
    alphanumerics); the flag alone supplies no characters.
    """
    classes = as_character_class(classes)
    chars = ''
    for character_class in SINGLE_CLASSES:
        if not classes & character_class:
            continue
        if character_class == CharacterClass.SPECIAL:
            chars += special_charset(allowed_special_chars)
        else:
            chars += _CLASS_CHARSETS[character_class]

    # Each character once so every draw is uniform over distinct characters
    return ''.join(dict.fromkeys(chars))
