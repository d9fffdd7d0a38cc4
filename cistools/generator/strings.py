"""
Secure random string generation, e.g. for passwords and URL tokens.

Every draw and the final shuffle use the operating system's cryptographically
secure source through :mod:`secrets`.
"""

import logging
import secrets
from typing import Dict, Mapping, Optional

from ..core.config import get_settings
from ..numeric.ranges import clamp_int
from ..types.errors import InvalidParameterError
from .charsets import (
    CharacterClass, CHARSET_SPECIAL_PASSWORD, CHARSET_SPECIAL_URL, as_character_class,
    resolve_charset
)

logger = logging.getLogger(__name__)

_system_random = secrets.SystemRandom()


def get_random_character(classes: CharacterClass = CharacterClass.ALL,
                         allowed_special_chars: str = "") -> str:
    """Draw a single character uniformly from the charset of ``classes``."""
    charset = resolve_charset(classes, allowed_special_chars)
    if not charset:
        raise InvalidParameterError(
            "Can not get random character for an empty set of characters.",
            parameter="classes", value=classes
        )
    return secrets.choice(charset)


def _effective_minimums(classes: CharacterClass,
                        minimum_per_class: Optional[Mapping[CharacterClass, int]]
                        ) -> Dict[CharacterClass, int]:
    minimums: Dict[CharacterClass, int] = {}

    for character_class, count in (minimum_per_class or {}).items():
        effective = as_character_class(character_class) & classes
        if not effective:
            logger.debug(f"Dropping minimum for disabled character class {character_class}")
            continue

        count = clamp_int(count, 0)
        if count:
            minimums[effective] = minimums.get(effective, 0) + count

    return minimums


def generate_secure_random_string(
    length: int = 10,
    classes: CharacterClass = CharacterClass.ALL,
    allowed_special_chars: str = "",
    minimum_per_class: Optional[Mapping[CharacterClass, int]] = None
) -> str:
    """
    Generate a cryptographically secure random string.

    Args:
        length: Exact length of the result; negative values count as zero
        classes: Enabled character classes
        allowed_special_chars: Characters making up the special class;
            alphanumerics are stripped
        minimum_per_class: Minimum number of characters per class; entries
            for disabled classes are ignored

    Returns:
        A shuffled string of ``length`` characters honoring every minimum

    Raises:
        InvalidParameterError: If the minimums exceed ``length`` or a
            required character set is empty
    """
    length = clamp_int(length, 0)
    classes = as_character_class(classes)
    minimums = _effective_minimums(classes, minimum_per_class)

    required = sum(minimums.values())
    if required > length:
        raise InvalidParameterError(
            "String generator failed to generate random string: Your required "
            "types of characters are higher than the required length of the string.",
            parameter="minimum_per_class", value=required,
            details={'length': length}
        )

    charsets = {}
    for character_class in minimums:
        charsets[character_class] = resolve_charset(character_class, allowed_special_chars)
        if not charsets[character_class]:
            raise InvalidParameterError(
                f"No characters available for required character class {character_class}.",
                parameter="allowed_special_chars", value=allowed_special_chars
            )

    union = resolve_charset(classes, allowed_special_chars)
    if length > 0 and not union:
        raise InvalidParameterError(
            "Can not get random character for an empty set of characters.",
            parameter="classes", value=classes
        )

    chars = []
    for character_class, count in minimums.items():
        chars.extend(secrets.choice(charsets[character_class]) for _ in range(count))

    chars.extend(secrets.choice(union) for _ in range(length - len(chars)))

    _system_random.shuffle(chars)
    return ''.join(chars)


def secure_password(length: Optional[int] = None) -> str:
    """
    Generate a random password using letters, digits and OWASP special characters.

    Uses ``Settings.password_length`` when no length is given.
    """
    if length is None:
        length = get_settings().password_length
    return generate_secure_random_string(length, CharacterClass.ALL, CHARSET_SPECIAL_PASSWORD)


def secure_url_token(length: Optional[int] = None) -> str:
    """
    Generate a random URL-valid string (with any common possible characters mixed).

    Uses ``Settings.url_token_length`` when no length is given.
    """
    if length is None:
        length = get_settings().url_token_length
    return generate_secure_random_string(length, CharacterClass.ALL, CHARSET_SPECIAL_URL)
